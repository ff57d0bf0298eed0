# src/winbuilder/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package paths.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the installed 'winbuilder' package."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def get_output_path(template_path: Path, out_dir: Path, suffix: str = ".html") -> Path:
        """
        Returns the output file for a template inside `out_dir`.
        Creates the directory if it doesn't exist.
        """
        out_dir.mkdir(parents=True, exist_ok=True)
        return out_dir / (template_path.stem + suffix)
