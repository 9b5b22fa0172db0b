# invoice_template/rendering/__init__.py
from .fonts import DEFAULT_FONT_FAMILY, find_font_resource, fonts_from_config, load_font_resource, register_font, resolve_font
from .pdf_renderer import InvoiceDocument, create_invoice_document, table_style_commands

__all__ = [
    'DEFAULT_FONT_FAMILY',
    'InvoiceDocument',
    'create_invoice_document',
    'find_font_resource',
    'fonts_from_config',
    'load_font_resource',
    'register_font',
    'resolve_font',
    'table_style_commands',
]
