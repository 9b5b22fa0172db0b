# invoice_template/builders/__init__.py
from .template_builder import TemplateBuilder, build_template
from .header_builder import HeaderBuilder
from .item_table_builder import ItemTableBuilder
from .footer_builder import FooterBuilder

__all__ = [
    'TemplateBuilder',
    'build_template',
    'HeaderBuilder',
    'ItemTableBuilder',
    'FooterBuilder',
]
