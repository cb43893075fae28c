from typing import List

from ..core import Element, LookupKind
from ..lookup import Lookup


class GetAll:
    """
    Returns every matching element of the rendered view.

    The only access mode that never fails and never hides how many
    elements matched. An unknown key gives an empty list.

    Example:
        <div>
          <p id="example-id">My cool paragraph</p>
          <p>Don't try and find me!</p>
          <div id="example-id">My other cool paragraph</div>
        </div>

        view.get_all.by_id("example-id")
        -> [<p id="example-id">, <div id="example-id">]
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup

    def by(self, kind: LookupKind, key: str) -> List[Element]:
        """All elements filed under any LookupKind."""
        return self._lookup.query(kind, key)

    def by_id(self, element_id: str) -> List[Element]:
        """All elements whose `id` attribute equals `element_id`."""
        return self._lookup.query(LookupKind.ID, element_id)

    def by_type(self, type_name: str) -> List[Element]:
        """All elements of a tag type, e.g. 'div', 'main' or 'p'."""
        return self._lookup.query(LookupKind.TYPE, type_name)

    def by_test_id(self, test_id: str) -> List[Element]:
        """All elements whose test attribute (default `data-testid`) equals `test_id`."""
        return self._lookup.query(LookupKind.TEST_ID, test_id)

    def by_partial_name(self, partial_name: str) -> List[Element]:
        """
        All inclusion points of the partial named `partial_name`.

        Example:
            <div data-testid="example"><partial name="_examplePartialName"/></div>
            <partial name="_examplePartialName"/>

            view.get_all.by_partial_name("_examplePartialName")
            -> both <partial> elements
        """
        return self._lookup.query(LookupKind.PARTIAL_NAME, partial_name)

    def by_asp_for(self, asp_for: str) -> List[Element]:
        """All elements bound to the model property `asp_for` (literal `asp-for` value)."""
        return self._lookup.query(LookupKind.ASP_FOR, asp_for)

    def by_asp_action(self, asp_action: str) -> List[Element]:
        """All elements whose `asp-action` attribute equals `asp_action`."""
        return self._lookup.query(LookupKind.ASP_ACTION, asp_action)

    def by_asp_controller(self, asp_controller: str) -> List[Element]:
        """All elements whose `asp-controller` attribute equals `asp_controller`."""
        return self._lookup.query(LookupKind.ASP_CONTROLLER, asp_controller)
