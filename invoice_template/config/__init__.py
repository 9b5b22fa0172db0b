# invoice_template/config/__init__.py
from .loader import RendererConfig, load_config, load_renderer_config

__all__ = [
    'RendererConfig',
    'load_config',
    'load_renderer_config',
]
