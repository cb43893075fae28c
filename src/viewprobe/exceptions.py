# src/viewprobe/exceptions.py
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from viewprobe.dom.core import LookupKind


class ViewProbeError(Exception):
    """Base class for every error raised by viewprobe."""


class TooManyElementsFoundException(ViewProbeError, LookupError):
    """
    Raised when a query that assumes uniqueness matches more than one element.
    Carries the kind, key and match count so the failing fixture is easy to find.
    """

    def __init__(self, kind: "LookupKind", key: str, count: int):
        self.kind = kind
        self.key = key
        self.count = count
        super().__init__(
            f"Expected at most one element for {kind.name}={key!r}, found {count}"
        )


class ViewNotFoundException(ViewProbeError, FileNotFoundError):
    """Raised when a view cannot be located in the configured view folder."""

    def __init__(self, view_name: str, folder: str):
        self.view_name = view_name
        self.folder = folder
        super().__init__(f"View '{view_name}' not found in '{folder}'")


class TemplateRenderException(ViewProbeError):
    """Raised when the template engine fails while rendering a view."""

    def __init__(self, view_name: str, reason: str):
        self.view_name = view_name
        self.reason = reason
        super().__init__(f"Failed to render '{view_name}': {reason}")
