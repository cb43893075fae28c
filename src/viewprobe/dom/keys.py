from typing import Optional
from bs4 import Tag

from .core import LookupKind, key_spec

PARTIAL_TAG = "partial"


def _attr(node: Tag, name: str) -> Optional[str]:
    """Reads an attribute as the literal string declared in the markup."""
    value = node.attrs.get(name)
    if isinstance(value, list):
        # Multi-valued attributes only appear when the parser was built with defaults
        return " ".join(value)
    return value


# --- KEY EXTRACTORS ---


@key_spec(LookupKind.ID)
def id_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    return _attr(node, "id")


@key_spec(LookupKind.TYPE)
def type_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    return node.name


@key_spec(LookupKind.TEST_ID)
def test_id_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    """The test attribute name is configurable; html.parser lowercases attribute names."""
    return _attr(node, test_id_attribute.lower())


@key_spec(LookupKind.PARTIAL_NAME)
def partial_name_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    """Only the <partial> inclusion point carries a partial name."""
    if node.name != PARTIAL_TAG:
        return None
    return _attr(node, "name")


@key_spec(LookupKind.ASP_FOR)
def asp_for_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    return _attr(node, "asp-for")


@key_spec(LookupKind.ASP_ACTION)
def asp_action_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    return _attr(node, "asp-action")


@key_spec(LookupKind.ASP_CONTROLLER)
def asp_controller_key(node: Tag, test_id_attribute: str) -> Optional[str]:
    return _attr(node, "asp-controller")
