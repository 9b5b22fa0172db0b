# invoice_template/utils/formatting.py
import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..exceptions import FormattingError

logger = logging.getLogger(__name__)

DATE_FORMAT = '%d.%m.%Y'
CENTS = Decimal('0.01')


def format_amount(value: Any, field_name: str = 'amount') -> str:
    """
    Formats a numeric value with exactly two decimal places ("12.50").
    Half-way values round away from zero, judged on the exact binary value
    of a float: 1.125 -> "1.13", but 1.005 -> "1.00".

    Raises:
        FormattingError: if the value is not numeric.
    """
    if not isinstance(value, (int, float, Decimal)):
        raise FormattingError(f"Cannot format {field_name}={value!r} to two decimal places: not a number")
    try:
        return str(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError) as e:
        logger.error(f"Cannot format {field_name}={value!r}: {e}")
        raise FormattingError(f"Cannot format {field_name}={value!r} to two decimal places: {e}") from e


def format_date(value: Any, field_name: str = 'date') -> str:
    """Formats a date/datetime as DD.MM.YYYY."""
    try:
        return value.strftime(DATE_FORMAT)
    except AttributeError as e:
        raise FormattingError(f"Cannot format {field_name}={value!r} as a date") from e


def join_location(post_code: Optional[str], city: Optional[str]) -> str:
    """'8000 Zurich'; the separating space only appears when both parts are set."""
    post_code = post_code or ''
    city = city or ''
    separator = ' ' if post_code and city else ''
    return f"{post_code}{separator}{city}"


def flat_address_text(address: Any) -> str:
    """
    Collapses an address into one comma-separated line: "name, street, postCode city".
    Empty pieces are left out.
    """
    if address is None:
        return ''
    try:
        name = address.name
        street = address.street
        post_code = address.post_code
        city = address.city
    except AttributeError as e:
        raise FormattingError(f"Unexpected address value: {address!r}") from e

    location = f"{post_code or ''} {city or ''}".strip()
    return ', '.join(piece for piece in (name, street, location) if piece)
