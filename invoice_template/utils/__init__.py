# invoice_template/utils/__init__.py
from .formatting import format_amount, format_date, flat_address_text, join_location

__all__ = [
    'format_amount',
    'format_date',
    'flat_address_text',
    'join_location',
]
