# src/viewprobe/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving package and view paths.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the installed 'viewprobe' package."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_path() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def resolve_view_folder(folder: Union[str, Path], base: Optional[Path] = None) -> Path:
        """
        Resolves a view folder to an absolute path.
        Relative folders are taken relative to `base` (default: the current working directory).
        """
        path = Path(folder).expanduser()
        if not path.is_absolute():
            path = (base or Path.cwd()) / path
        resolved = path.resolve()
        if not resolved.is_dir():
            logger.warning("View folder does not exist: %s", resolved)
        return resolved
