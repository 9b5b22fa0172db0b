# invoice_template/builders/item_table_builder.py
import logging
from typing import Any, Dict, List, Sequence

from ..models import LineItem
from ..styling.layouts import TABLE_LAYOUT
from ..utils.formatting import format_amount

logger = logging.getLogger(__name__)

ITEM_TABLE_WIDTHS = ['*', 70, 70, 70]


def _right(text: str) -> Dict[str, str]:
    return {'text': text, 'alignment': 'right'}


def item_table_header() -> List[Any]:
    return ['Beschreibung', _right('Menge'), _right('Preis'), _right('Betrag')]


def item_description_cell(item: LineItem) -> Any:
    """The item name, stacked over a gray description line when there is one."""
    if item.description:
        return {
            'stack': [
                item.name,
                {'margin': [0, 2, 0, 0], 'text': item.description, 'color': 'gray'},
            ]
        }
    return item.name


def item_row(item: LineItem) -> List[Any]:
    return [
        item_description_cell(item),
        _right(format_amount(item.quantity, 'quantity')),
        _right(format_amount(item.rate, 'rate')),
        _right(format_amount(item.total, 'total')),
    ]


class ItemTableBuilder:
    """Builds the line-items table: one header row plus one row per item, in input order."""

    def __init__(self, items: Sequence[LineItem]):
        self.items = items

    def build(self) -> Dict[str, Any]:
        body = [item_table_header()]
        for index, item in enumerate(self.items):
            try:
                body.append(item_row(item))
            except Exception as e:
                logger.error(f"Could not build row for line item #{index} ({getattr(item, 'name', None)!r}): {e}")
                raise
        logger.debug(f"Line items table: {len(body) - 1} item rows")
        return {
            'margin': [0, 25, 0, 0],
            'layout': TABLE_LAYOUT,
            'table': {
                'headerRows': 1,
                'widths': list(ITEM_TABLE_WIDTHS),
                'body': body,
            },
        }
