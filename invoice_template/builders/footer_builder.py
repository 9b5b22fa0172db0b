# invoice_template/builders/footer_builder.py
import logging
from typing import Any, Dict, List, Sequence

from ..models import Amount, TaxGroup
from ..styling.layouts import FOOTER_LAYOUT
from ..utils.formatting import format_amount

logger = logging.getLogger(__name__)

FOOTER_TABLE_WIDTHS = ['*', 'auto']

SUBTOTAL_LABEL = 'Zwischensumme'
ADJUSTMENT_LABEL = 'Anpassung'
TOTAL_LABEL = 'Gesamtsumme'


def _amount_cell(value: Any, field_name: str) -> Dict[str, str]:
    return {'text': format_amount(value, field_name), 'alignment': 'right'}


def show_subtotal(sub_total: Amount, total: Amount, adjustment: Amount, tax_groups: Sequence[TaxGroup]) -> bool:
    """
    The subtotal is only worth a row when something sits between it and the total.
    A zero subtotal is never shown, even if it differs from the total.
    """
    if not sub_total or sub_total == total:
        return False
    return bool(adjustment) or len(tax_groups) > 0


def footer_rows(
    sub_total: Amount,
    adjustment: Amount,
    tax_groups: Sequence[TaxGroup],
    total: Amount,
    currency: str,
) -> List[List[Any]]:
    rows = []
    if show_subtotal(sub_total, total, adjustment, tax_groups):
        rows.append([SUBTOTAL_LABEL, _amount_cell(sub_total, 'sub_total')])

    for tax_group in tax_groups:
        rows.append([tax_group.name, _amount_cell(tax_group.amount, f"tax_groups[{tax_group.name!r}]")])

    if adjustment:
        rows.append([ADJUSTMENT_LABEL, _amount_cell(adjustment, 'adjustment')])

    # Grand total is always the last row
    rows.append([f"{TOTAL_LABEL} {currency}", _amount_cell(total, 'total')])
    return rows


class FooterBuilder:
    def __init__(self, sub_total: Amount = 0, adjustment: Amount = 0,
                 tax_groups: Sequence[TaxGroup] = (), total: Amount = 0, currency: str = 'CHF'):
        self.sub_total = sub_total
        self.adjustment = adjustment
        self.tax_groups = tax_groups
        self.total = total
        self.currency = currency

    def build(self) -> Dict[str, Any]:
        body = footer_rows(self.sub_total, self.adjustment, self.tax_groups, self.total, self.currency)
        logger.debug(f"Totals table: {len(body)} rows ({len(self.tax_groups)} tax groups)")
        return {
            'margin': [0, 25, 0, 0],
            'layout': FOOTER_LAYOUT,
            'table': {
                'headerRows': 1,
                'widths': list(FOOTER_TABLE_WIDTHS),
                'body': body,
            },
        }
