from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Callable, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from bs4 import Tag


class LookupKind(str, Enum):
    """The fixed set of dimensions a rendered view can be queried on."""
    ID = "id"
    TYPE = "type"
    TEST_ID = "test_id"
    PARTIAL_NAME = "partial_name"
    ASP_FOR = "asp_for"
    ASP_ACTION = "asp_action"
    ASP_CONTROLLER = "asp_controller"


def key_spec(kind: LookupKind):
    """
    Decorator to declare which LookupKind a key extractor serves.
    Facilitates registration by the KeyRegistry.
    """
    def decorator(func):
        func.lookup_kind = kind
        return func
    return decorator


# Key extractor signature: (node, test_id_attribute) -> key or None
KeyExtractor = Callable[[Tag, str], Optional[str]]


class Element(BaseModel):
    """
    Read-only view on a single node of the rendered tree.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag: str
    text: str = ""
    classes: Tuple[str, ...] = ()
    attrs: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    node: Optional[Tag] = Field(default=None, exclude=True, repr=False)

    @field_validator("attrs", mode="after")
    @classmethod
    def freeze_attrs(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash((self.tag, self.text, self.classes, tuple(sorted(self.attrs.items()))))

    @classmethod
    def from_tag(cls, tag: Tag) -> "Element":
        """Wraps a BeautifulSoup Tag, flattening multi-valued attributes to strings."""
        attrs = {
            name: " ".join(value) if isinstance(value, list) else value
            for name, value in tag.attrs.items()
        }
        return cls(
            tag=tag.name,
            text=tag.get_text(),
            classes=tuple(attrs.get("class", "").split()),
            attrs=attrs,
            node=tag,
        )

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Returns a single attribute value."""
        return self.attrs.get(name, default)

    def has_class(self, name: str) -> bool:
        return name in self.classes
