import logging
from typing import Optional

from ..core import Element, LookupKind
from ..lookup import Lookup
from ..results import OnlyResult

logger = logging.getLogger(__name__)


class GetOnly:
    """
    Returns the single matching element of the rendered view.

    - No match: None, so absence can be asserted directly.
    - One match: that element.
    - Two or more: TooManyElementsFoundException naming the kind and key.

    This turns a fixture that accidentally repeats an id into a loud
    failure instead of a silent pick of the first element.
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup

    def resolve(self, kind: LookupKind, key: str) -> OnlyResult:
        """Tagged result for (kind, key) without raising."""
        return OnlyResult.from_matches(kind, key, self._lookup.query(kind, key))

    def by(self, kind: LookupKind, key: str) -> Optional[Element]:
        """The single element filed under any LookupKind; raises when ambiguous."""
        kind = LookupKind(kind)
        result = self.resolve(kind, key)
        if result.is_ambiguous:
            logger.debug("Ambiguous %s lookup for %r: %d matches", kind.name, key, result.count)
        return result.unwrap()

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
