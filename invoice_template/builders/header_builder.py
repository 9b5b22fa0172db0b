# invoice_template/builders/header_builder.py
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..models import Address
from ..styling.layouts import NO_BORDERS
from ..utils.formatting import format_date, join_location

logger = logging.getLogger(__name__)

HEADER_TABLE_WIDTHS = ['auto', '*', 'auto', 'auto']

DATE_LABEL = 'Datum:'
DUE_DATE_LABEL = 'Zahlbar bis:'
INVOICE_NUMBER_LABEL = 'Rechnungsnummer:'
CUSTOMER_LABEL = 'Kunde:'


def billing_address_lines(address: Optional[Address]) -> List[str]:
    """
    Lines of the recipient block: name, attn, street and "postCode city",
    each one only if it is set.
    """
    if address is None:
        return []

    lines = [value for value in (address.name, address.attn, address.street) if value]
    location = join_location(address.post_code, address.city)
    if location:
        lines.append(location)
    return lines


def metadata_fields(
    date: Any = None,
    due_date: Any = None,
    invoice_number: Any = None,
    customer_name: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """(label, value) pairs shown on the right hand side of the header."""
    fields = []
    if date:
        fields.append((DATE_LABEL, format_date(date, 'date')))
    if due_date:
        fields.append((DUE_DATE_LABEL, format_date(due_date, 'due_date')))
    if invoice_number:
        fields.append((INVOICE_NUMBER_LABEL, str(invoice_number)))
    if customer_name:
        fields.append((CUSTOMER_LABEL, customer_name))
    return fields


def header_table_body(left_fields: List[str], right_fields: List[Tuple[str, str]]) -> List[List[Any]]:
    """
    Puts the address lines and the metadata pairs side by side.
    The shorter side is padded with empty cells.
    """
    body = []
    for index in range(max(len(left_fields), len(right_fields))):
        left_value = left_fields[index] if index < len(left_fields) else ''
        label, value = right_fields[index] if index < len(right_fields) else ('', '')
        body.append([
            left_value or '',
            '',
            label or '',
            {'text': value or '', 'alignment': 'right'},
        ])
    return body


class HeaderBuilder:
    def __init__(self, billing_address: Optional[Address], date: Any, due_date: Any,
                 invoice_number: Any = None, customer_name: Optional[str] = None):
        self.billing_address = billing_address
        self.date = date
        self.due_date = due_date
        self.invoice_number = invoice_number
        self.customer_name = customer_name

    def build(self) -> Dict[str, Any]:
        left_fields = billing_address_lines(self.billing_address)
        right_fields = metadata_fields(self.date, self.due_date, self.invoice_number, self.customer_name)
        body = header_table_body(left_fields, right_fields)
        logger.debug(f"Header table: {len(left_fields)} address lines, {len(right_fields)} metadata fields, {len(body)} rows")
        return {
            'margin': [0, 10, 0, 0],
            'layout': NO_BORDERS,
            'table': {
                'widths': list(HEADER_TABLE_WIDTHS),
                'body': body,
            },
        }
