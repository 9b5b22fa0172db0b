# invoice_template/exceptions.py


class InvoiceTemplateError(Exception):
    """Base class for all errors raised by invoice_template."""


class FormattingError(InvoiceTemplateError, ValueError):
    """A field could not be rendered into the layout tree (e.g. a non-numeric amount)."""


class ConfigurationError(InvoiceTemplateError):
    """Renderer configuration or font resources could not be loaded."""
