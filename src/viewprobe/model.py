# src/viewprobe/model.py
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from viewprobe.core.managers.config_manager import config_manager


class RenderConfiguration(BaseModel):
    """
    Settings for rendering and indexing a view.
    Fields left unset fall back to the package settings.json.
    """
    view_folder_location: Optional[Path] = Field(
        default=None, description="Folder the views (and their partials) are loaded from."
    )
    test_id_attribute: Optional[str] = Field(
        default=None, description="Attribute used for TEST_ID lookups."
    )
    parser_features: Optional[str] = Field(
        default=None, description="BeautifulSoup tree builder, e.g. 'html.parser' or 'lxml'."
    )
    autoescape: Optional[bool] = Field(
        default=None, description="Whether Jinja2 escapes model values."
    )

    @model_validator(mode='after')
    def apply_defaults(self):
        """Fill unset fields from the ConfigManager."""
        if self.test_id_attribute is None:
            self.test_id_attribute = config_manager.get_nested("lookup.test_id_attribute", "data-testid")
        if self.parser_features is None:
            self.parser_features = config_manager.get_nested("render.parser_features", "html.parser")
        if self.autoescape is None:
            self.autoescape = bool(config_manager.get_nested("render.autoescape", True))
        return self
