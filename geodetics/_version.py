"""
Resolves the installed version of geodetics
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_tree_version() -> Optional[str]:
    """Reads the repo-root VERSION file when running from an uninstalled checkout"""
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__ = version('geodetics')
except PackageNotFoundError:
    __version__ = _source_tree_version()

__all__ = ['__version__']
