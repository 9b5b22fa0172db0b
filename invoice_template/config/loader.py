# invoice_template/config/loader.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class RendererConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_size: Literal['A4', 'LETTER'] = Field(default='A4', alias='pageSize')
    # left, top, right, bottom in points
    page_margins: List[float] = Field(default_factory=lambda: [40, 60, 40, 60], alias='pageMargins',
                                      min_length=4, max_length=4)
    font_family: str = Field(default='Roboto', alias='fontFamily')
    font_path: Optional[str] = Field(default=None, alias='fontPath')
    # looked up on reportlab's TTF search path when no font_path is set
    font_file: str = Field(default='Roboto-Regular.ttf', alias='fontFile')
    title: str = 'Rechnung'


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {config_path}")
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Could not decode JSON from {config_path}: {e}")
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e


def load_renderer_config(config_path: Optional[Union[str, Path]] = None) -> RendererConfig:
    """Parses the renderer configuration; defaults when no path is given."""
    if config_path is None:
        return RendererConfig()

    raw_config = load_config(config_path)
    logger.debug(f"Loaded renderer config from {config_path}: {raw_config}")
    try:
        return RendererConfig(**raw_config)
    except (TypeError, ValidationError) as e:
        logger.error(f"Invalid renderer configuration in {config_path}: {e}")
        raise ConfigurationError(f"Invalid renderer configuration in {config_path}: {e}") from e
