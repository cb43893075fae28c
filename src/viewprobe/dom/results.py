from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from .core import Element, LookupKind
from ..exceptions import TooManyElementsFoundException


class OnlyStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    AMBIGUOUS = "ambiguous"


class OnlyResult(BaseModel):
    """
    Tagged outcome of a uniqueness-assuming query.

    Keeps "nothing matched" and "too much matched" apart until the caller
    decides how to surface them (GetOnly raises on AMBIGUOUS).
    """
    model_config = ConfigDict(frozen=True)

    kind: LookupKind
    key: str
    status: OnlyStatus
    element: Optional[Element] = None
    count: int = 0

    @classmethod
    def from_matches(cls, kind: LookupKind, key: str, matches: List[Element]) -> "OnlyResult":
        if not matches:
            return cls(kind=kind, key=key, status=OnlyStatus.ABSENT)
        if len(matches) == 1:
            return cls(kind=kind, key=key, status=OnlyStatus.FOUND, element=matches[0], count=1)
        return cls(kind=kind, key=key, status=OnlyStatus.AMBIGUOUS, count=len(matches))

    @property
    def is_ambiguous(self) -> bool:
        return self.status is OnlyStatus.AMBIGUOUS

    def unwrap(self) -> Optional[Element]:
        """Returns the element (or None when absent); raises when ambiguous."""
        if self.is_ambiguous:
            raise TooManyElementsFoundException(self.kind, self.key, self.count)
        return self.element
