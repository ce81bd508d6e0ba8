"""
Path utilities and resource management.
"""
import os
import sys
from ..core.config import PROPERTIES_FILE


def _resource_path(rel: str) -> str:
    """Get absolute path to a bundled resource, works for dev and for PyInstaller."""
    if getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
        # PyInstaller unpacks data files into _MEIPASS
        base_path = os.path.join(sys._MEIPASS, "font_autosize")
    else:
        base_path = os.path.join(os.path.dirname(__file__), "..")
    return os.path.normpath(os.path.join(base_path, "resources", rel))


def _get_properties_path():
    """Get the path to the bundled fontsize.properties file."""
    return _resource_path(PROPERTIES_FILE)
