"""
Exposes the version of mollweidemap
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> Optional[str]:
    """Fallback for source checkouts without installed package metadata"""
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__ = version('mollweidemap')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
