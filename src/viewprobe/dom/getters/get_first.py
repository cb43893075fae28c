from typing import Optional

from ..core import Element, LookupKind
from ..lookup import Lookup


class GetFirst:
    """
    Returns the first matching element in document order, or None.
    Further matches are ignored; use GetAll when the count matters.
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup

    def by(self, kind: LookupKind, key: str) -> Optional[Element]:
        """First element filed under any LookupKind, or None."""
        matches = self._lookup.query(kind, key)
        return matches[0] if matches else None

    def by_id(self, element_id: str) -> Optional[Element]:
        return self.by(LookupKind.ID, element_id)

    def by_type(self, type_name: str) -> Optional[Element]:
        return self.by(LookupKind.TYPE, type_name)

    def by_test_id(self, test_id: str) -> Optional[Element]:
        return self.by(LookupKind.TEST_ID, test_id)

    def by_partial_name(self, partial_name: str) -> Optional[Element]:
        return self.by(LookupKind.PARTIAL_NAME, partial_name)

    def by_asp_for(self, asp_for: str) -> Optional[Element]:
        return self.by(LookupKind.ASP_FOR, asp_for)

    def by_asp_action(self, asp_action: str) -> Optional[Element]:
        return self.by(LookupKind.ASP_ACTION, asp_action)

    def by_asp_controller(self, asp_controller: str) -> Optional[Element]:
        return self.by(LookupKind.ASP_CONTROLLER, asp_controller)
