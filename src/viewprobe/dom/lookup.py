# src/viewprobe/dom/lookup.py
import logging
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from .core import Element, LookupKind
from .registry import KeyRegistry
from viewprobe.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

DEFAULT_TEST_ID_ATTRIBUTE = "data-testid"


class Lookup:
    """
    Frozen, queryable index over one rendered tree.

    The tree is walked exactly once, at construction. Every node is filed
    under each LookupKind for which it carries a key, in document order.
    Queries afterwards are pure reads against those tables.
    """

    def __init__(self, root: Tag, test_id_attribute: Optional[str] = None):
        """
        Args:
            root (Tag): A parsed BeautifulSoup document or a single element.
                        When an element is passed it is indexed itself too.
            test_id_attribute (Optional[str]): Attribute used for TEST_ID lookups.
                        Defaults to 'lookup.test_id_attribute' from settings.json.
        """
        KeyRegistry.discover()
        self._root = root
        self.test_id_attribute = test_id_attribute or config_manager.get_nested(
            "lookup.test_id_attribute", DEFAULT_TEST_ID_ATTRIBUTE
        )
        self._index: Dict[LookupKind, Dict[str, List[Tag]]] = {kind: {} for kind in LookupKind}
        self._node_count = 0
        self._build()

    @property
    def root(self) -> Tag:
        return self._root

    def _build(self) -> None:
        """Single document-order traversal filling every kind's table."""
        extractors = KeyRegistry.get_all_extractors()

        nodes = [] if isinstance(self._root, BeautifulSoup) else [self._root]
        nodes.extend(self._root.find_all(True))

        for node in nodes:
            self._node_count += 1
            for kind, extract in extractors.items():
                key = extract(node, self.test_id_attribute)
                # Empty string is a legitimate attribute value; only None means "no key"
                if key is None:
                    continue
                self._index[kind].setdefault(key, []).append(node)

        logger.debug(
            "Indexed %d nodes: %s",
            self._node_count,
            ", ".join(f"{kind.name}={len(table)}" for kind, table in self._index.items()),
        )

    def query(self, kind: LookupKind, key: str) -> List[Element]:
        """
        Returns every element filed under (kind, key) in document order.
        Unknown keys yield an empty list; this method never raises.
        """
        return [Element.from_tag(node) for node in self._index[LookupKind(kind)].get(key, [])]

    def count(self, kind: LookupKind, key: str) -> int:
        """Number of matches for (kind, key) without wrapping the nodes."""
        return len(self._index[LookupKind(kind)].get(key, []))

    def keys(self, kind: LookupKind) -> List[str]:
        """Known keys for one kind, in the order they were first seen."""
        return list(self._index[LookupKind(kind)])

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return f"<Lookup nodes={self._node_count} test_id_attribute={self.test_id_attribute!r}>"
