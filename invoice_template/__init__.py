# invoice_template/__init__.py
from .builders import TemplateBuilder, build_template
from .exceptions import ConfigurationError, FormattingError, InvoiceTemplateError
from .models import Address, InvoiceOptions, LineItem, TaxGroup
from .rendering import InvoiceDocument, create_invoice_document
from .styling import FOOTER_LAYOUT, TABLE_LAYOUT

__all__ = [
    'Address',
    'ConfigurationError',
    'FOOTER_LAYOUT',
    'FormattingError',
    'InvoiceDocument',
    'InvoiceOptions',
    'InvoiceTemplateError',
    'LineItem',
    'TABLE_LAYOUT',
    'TaxGroup',
    'TemplateBuilder',
    'build_template',
    'create_invoice_document',
]
