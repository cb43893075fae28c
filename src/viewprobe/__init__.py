"""
viewprobe: query rendered views by id, tag type, test id, partial name and
asp-* binding attributes, through GetAll / GetFirst / GetOnly.
"""
from viewprobe.dom.core import Element, LookupKind
from viewprobe.dom.lookup import Lookup
from viewprobe.dom.results import OnlyResult, OnlyStatus
from viewprobe.dom.getters import GetAll, GetFirst, GetOnly
from viewprobe.exceptions import (
    ViewProbeError,
    TooManyElementsFoundException,
    ViewNotFoundException,
    TemplateRenderException,
)
from viewprobe.model import RenderConfiguration
from viewprobe.rendering.rendered_view import RenderedView
from viewprobe.rendering.template import Template
from viewprobe.core.utils.configure_logging import configure_logger

__all__ = [
    "Element",
    "LookupKind",
    "Lookup",
    "OnlyResult",
    "OnlyStatus",
    "GetAll",
    "GetFirst",
    "GetOnly",
    "ViewProbeError",
    "TooManyElementsFoundException",
    "ViewNotFoundException",
    "TemplateRenderException",
    "RenderConfiguration",
    "RenderedView",
    "Template",
    "configure_logger",
]
