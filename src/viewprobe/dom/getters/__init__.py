from .get_all import GetAll
from .get_first import GetFirst
from .get_only import GetOnly

__all__ = ["GetAll", "GetFirst", "GetOnly"]
