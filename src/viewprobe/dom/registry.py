import logging
from typing import Dict, Optional

from .core import KeyExtractor, LookupKind

logger = logging.getLogger(__name__)


class KeyRegistry:
    """
    Central registry mapping every LookupKind to the function that derives
    a node's key for that kind.

    Extractors are discovered from the 'viewprobe.dom.keys' module: every
    callable carrying a `lookup_kind` attribute (set by @key_spec) is registered.
    """

    _extractors: Dict[LookupKind, KeyExtractor] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """Registers all extractors found in 'viewprobe.dom.keys'. Runs once."""
        if cls._loaded:
            return

        from . import keys as keys_module

        # Tables are only published once every kind is covered.
        found: Dict[LookupKind, KeyExtractor] = {}
        for name, candidate in vars(keys_module).items():
            kind = getattr(candidate, "lookup_kind", None)
            if not callable(candidate) or not isinstance(kind, LookupKind):
                continue
            if kind in found:
                raise ValueError(f"Duplicate key extractor for {kind.name}: {name}")
            found[kind] = candidate
            logger.debug("Key extractor loaded: %s -> %s", kind.name, name)

        missing = [kind.name for kind in LookupKind if kind not in found]
        if missing:
            raise ValueError(f"No key extractor registered for: {', '.join(missing)}")

        cls._extractors = found
        cls._loaded = True

    @classmethod
    def get_extractor(cls, kind: LookupKind) -> Optional[KeyExtractor]:
        """Retrieves the extractor for a specific kind."""
        return cls._extractors.get(kind)

    @classmethod
    def get_all_extractors(cls) -> Dict[LookupKind, KeyExtractor]:
        """Returns the extractors in LookupKind declaration order."""
        return {kind: cls._extractors[kind] for kind in LookupKind if kind in cls._extractors}
