# invoice_template/rendering/fonts.py
import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont, TTFOpenFile

from ..config.loader import RendererConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = 'Roboto'
FALLBACK_FONT = 'Helvetica'

# family name -> base64 data registered with reportlab by this module
_registered_fonts: Dict[str, str] = {}


def load_font_resource(font_path: Union[str, Path]) -> str:
    """Reads a TTF file and returns it base64-encoded, the form the renderer receives fonts in."""
    try:
        data = Path(font_path).read_bytes()
    except OSError as e:
        logger.error(f"Could not read font file {font_path}: {e}")
        raise ConfigurationError(f"Could not read font file {font_path}: {e}") from e
    return base64.b64encode(data).decode('ascii')


def find_font_resource(file_name: str) -> Optional[str]:
    """
    Looks ``file_name`` up as given, then on reportlab's TTF search path.
    Returns the base64-encoded font, or None if it is not installed.
    """
    try:
        found_path, font_file = TTFOpenFile(file_name)
    except TTFError:
        logger.debug(f"Font file {file_name} not found on the TTF search path")
        return None
    try:
        data = font_file.read()
    finally:
        font_file.close()
    logger.debug(f"Using font file {found_path}")
    return base64.b64encode(data).decode('ascii')


def fonts_from_config(config: RendererConfig) -> Dict[str, str]:
    """
    Font map for the configured family. An explicit ``font_path`` must exist;
    otherwise ``font_file`` is searched for and the map stays empty if it is missing.
    """
    if config.font_path:
        return {config.font_family: load_font_resource(config.font_path)}
    encoded = find_font_resource(config.font_file)
    if encoded is None:
        return {}
    return {config.font_family: encoded}


def register_font(name: str, encoded: str) -> str:
    """
    Registers a base64-encoded TTF with reportlab under ``name``.

    reportlab keeps one face per name for the whole process: once a name is
    registered, later calls keep the first face and warn if the data differs.
    """
    if name in _registered_fonts:
        if _registered_fonts[name] != encoded:
            logger.warning(f"Font '{name}' is already registered with different data; keeping the first one")
        return name
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        raw = base64.b64decode(encoded, validate=True)
        pdfmetrics.registerFont(TTFont(name, io.BytesIO(raw)))
    except (binascii.Error, TTFError, ValueError) as e:
        logger.error(f"Could not register font '{name}': {e}")
        raise ConfigurationError(f"Font '{name}' is not a valid base64-encoded TrueType font: {e}") from e
    _registered_fonts[name] = encoded
    logger.info(f"Registered font '{name}' ({len(raw)} bytes)")
    return name


def resolve_font(fonts: Optional[Mapping[str, str]], family: str = DEFAULT_FONT_FAMILY) -> str:
    """
    Returns the reportlab font name to draw with: ``family`` if the font map
    carries it, Helvetica otherwise.
    """
    if fonts and fonts.get(family):
        return register_font(family, fonts[family])
    logger.warning(f"No font data for '{family}', falling back to {FALLBACK_FONT}")
    return FALLBACK_FONT
