# invoice_template/styling/__init__.py
from .layouts import DEFAULT_STYLE, FOOTER_LAYOUT, NO_BORDERS, TABLE_LAYOUT

__all__ = [
    'DEFAULT_STYLE',
    'FOOTER_LAYOUT',
    'NO_BORDERS',
    'TABLE_LAYOUT',
]
