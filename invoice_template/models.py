# invoice_template/models.py
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictFloat, StrictInt, ValidationError, model_validator

from .exceptions import FormattingError

# Numeric strings and booleans are rejected, not coerced.
Amount = Union[StrictInt, StrictFloat, Annotated[Decimal, Strict()]]
DateLike = Union[datetime, date]


class _InvoiceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode='before')
    @classmethod
    def _drop_none_values(cls, data: Any) -> Any:
        # An explicit null means "use the default", same as leaving the key out.
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Address(_InvoiceModel):
    name: Optional[str] = None
    attn: Optional[str] = None
    street: Optional[str] = None
    post_code: Optional[str] = Field(default=None, alias='postCode')
    city: Optional[str] = None


class LineItem(_InvoiceModel):
    name: str = ''
    description: Optional[str] = None
    quantity: Amount = 0
    rate: Amount = 0
    total: Amount = 0


class TaxGroup(_InvoiceModel):
    name: str = ''
    amount: Amount = 0


class InvoiceOptions(_InvoiceModel):
    """
    Business fields of a single invoice.

    Every field is optional. Dates are resolved to "now" / "now + 10 days"
    by the template builder, not here, so that an options record stays a
    plain description of what the caller supplied.
    """
    organization_address: Optional[Address] = Field(default=None, alias='organizationAddress')
    billing_address: Address = Field(default_factory=Address, alias='billingAddress')
    date: Optional[DateLike] = None
    due_date: Optional[DateLike] = Field(default=None, alias='dueDate')
    invoice_number: Optional[Union[str, int]] = Field(default=None, alias='invoiceNumber')
    customer_name: Optional[str] = Field(default=None, alias='customerName')
    items: List[LineItem] = Field(default_factory=list)
    sub_total: Amount = Field(default=0, alias='subTotal')
    adjustment: Amount = 0
    tax_groups: List[TaxGroup] = Field(default_factory=list, alias='taxGroups')
    total: Amount = 0
    currency: str = 'CHF'
    note: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'InvoiceOptions':
        """Validates a plain mapping (camelCase or snake_case keys)."""
        if not isinstance(data, Mapping):
            raise FormattingError(f"Invoice options must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise FormattingError(f"Invalid invoice options: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
