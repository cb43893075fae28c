from bs4 import Tag

from viewprobe.dom.getters import GetAll, GetFirst, GetOnly
from viewprobe.dom.lookup import Lookup


class RenderedView:
    """
    The result of rendering one view: the markup, its one frozen Lookup,
    and the three query façades sharing that Lookup.
    """

    def __init__(self, markup: str, root: Tag, test_id_attribute: str):
        self.markup = markup
        self.lookup = Lookup(root, test_id_attribute=test_id_attribute)
        self.get_all = GetAll(self.lookup)
        self.get_first = GetFirst(self.lookup)
        self.get_only = GetOnly(self.lookup)

    def __repr__(self) -> str:
        return f"<RenderedView {self.lookup!r}>"
