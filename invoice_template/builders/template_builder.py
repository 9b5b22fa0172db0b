# invoice_template/builders/template_builder.py
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import FormattingError
from ..models import Address, InvoiceOptions
from ..styling.layouts import DEFAULT_STYLE
from ..utils.formatting import flat_address_text
from .footer_builder import FooterBuilder
from .header_builder import HeaderBuilder
from .item_table_builder import ItemTableBuilder

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = 'CHF'
DEFAULT_PAYMENT_TERM = timedelta(days=10)
TITLE = 'Rechnung'


class TemplateBuilder:
    """
    Turns an InvoiceOptions record into the renderer's document definition.

    Layout (top to bottom): organization address caption, address/metadata
    header table, title, line items table, totals table and an optional note.
    The returned tree is newly allocated on every call.
    """

    def __init__(self, options: Union[InvoiceOptions, Mapping[str, Any], None] = None,
                 now: Optional[datetime] = None):
        if options is None:
            options = InvoiceOptions()
        elif not isinstance(options, InvoiceOptions):
            options = InvoiceOptions.from_dict(options)
        self.options = options
        self.now = now

    def _resolve_defaults(self) -> Dict[str, Any]:
        options = self.options
        now = self.now or datetime.now()

        billing_address = options.billing_address or Address()
        organization_address = options.organization_address or None
        for field_name, address in (('billing_address', billing_address),
                                    ('organization_address', organization_address)):
            if address is not None and not isinstance(address, Address):
                raise FormattingError(f"{field_name} must be an Address, got {type(address).__name__}")

        return {
            'organization_address': organization_address,
            'billing_address': billing_address,
            'date': options.date or now,
            'due_date': options.due_date or now + DEFAULT_PAYMENT_TERM,
            'invoice_number': options.invoice_number or '',
            'customer_name': options.customer_name or '',
            'items': options.items or [],
            'sub_total': options.sub_total or 0,
            'adjustment': options.adjustment or 0,
            'tax_groups': options.tax_groups or [],
            'total': options.total or 0,
            'currency': options.currency or DEFAULT_CURRENCY,
            'note': options.note,
        }

    def build(self) -> Dict[str, Any]:
        values = self._resolve_defaults()

        header_table = HeaderBuilder(
            billing_address=values['billing_address'],
            date=values['date'],
            due_date=values['due_date'],
            invoice_number=values['invoice_number'],
            customer_name=values['customer_name'],
        ).build()
        items_table = ItemTableBuilder(values['items']).build()
        footer_table = FooterBuilder(
            sub_total=values['sub_total'],
            adjustment=values['adjustment'],
            tax_groups=values['tax_groups'],
            total=values['total'],
            currency=values['currency'],
        ).build()

        content = [
            {
                'text': flat_address_text(values['organization_address']),
                'margin': [0, 100, 0, 0],
                'fontSize': 8,
                'color': 'gray',
            },
            header_table,
            {
                'fontSize': 18,
                'text': TITLE,
                'margin': [0, 50, 0, 0],
            },
            items_table,
            footer_table,
        ]

        if values['note']:
            content.append({
                'text': values['note'],
                'margin': [0, 20, 0, 0],
                'color': 'gray',
                'fontSize': 8,
            })

        logger.debug(f"Built invoice template with {len(content)} content blocks")
        return {
            'defaultStyle': dict(DEFAULT_STYLE),
            'content': content,
        }


def build_template(options: Union[InvoiceOptions, Mapping[str, Any], None] = None,
                   now: Optional[datetime] = None) -> Dict[str, Any]:
    """Convenience wrapper around ``TemplateBuilder(options, now).build()``."""
    return TemplateBuilder(options, now=now).build()
