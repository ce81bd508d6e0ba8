"""
Resolution and font size lookup tables.

Two tables are built once from the font configuration:

- resolutions: "{width}x{height}" -> screen name, e.g. resolution.2560x1440=dell
- font sizes:  screen name -> font size, e.g. dellFontSize=14

Both are read-only after construction.
"""
import re
from collections import namedtuple
from types import MappingProxyType
from ..utils import debug
from .config import (
    FONTSIZE_SUFFIX,
    NORMAL_FONT_SIZE_KEY,
    NORMAL_SCREEN,
    RESOLUTION_PREFIX,
    RETINA_FONT_SIZE_KEY,
    RETINA_HEIGHT_KEY,
    RETINA_SCREEN,
    RETINA_WIDTH_KEY,
)
from .errors import ConfigurationError


_RESOLUTION_RE = re.compile(r"^(\d+)x(\d+)$", re.IGNORECASE)


class ScreenBounds(namedtuple("ScreenBounds", ["width", "height"])):
    """Width and height of the screen showing the host window."""

    __slots__ = ()

    @property
    def resolution_key(self):
        return resolution_key(self.width, self.height)


def resolution_key(width, height):
    """Normalized "{width}x{height}" key."""
    return f"{int(width)}x{int(height)}".lower()


def _required_int(entries, key):
    raw = entries.get(key)
    if raw is None or raw == "":
        raise ConfigurationError(f"Missing required setting '{key}'")
    return _parse_int(key, raw)


def _parse_int(key, raw):
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(f"Setting '{key}' is not an integer: {raw!r}") from None


def _font_size(key, raw):
    size = _parse_int(key, raw)
    if size <= 0:
        raise ConfigurationError(f"Font size '{key}' must be positive, got {size}")
    return size


class FontTables:
    """Resolution registry and font size table."""

    def __init__(self, resolutions, font_sizes, normal_font_size):
        self._resolutions = MappingProxyType(dict(resolutions))
        self._font_sizes = MappingProxyType(dict(font_sizes))
        self.normal_font_size = normal_font_size

    @property
    def resolutions(self):
        return self._resolutions

    @property
    def font_sizes(self):
        return self._font_sizes

    @classmethod
    def from_properties(cls, entries):
        """Build both tables from flat key/value configuration entries.

        Raises ConfigurationError when a required integer is missing or
        malformed, or when any font size is not a positive integer.
        """
        normal_font_size = _font_size(NORMAL_FONT_SIZE_KEY, _required_int(entries, NORMAL_FONT_SIZE_KEY))
        retina_font_size = _font_size(RETINA_FONT_SIZE_KEY, _required_int(entries, RETINA_FONT_SIZE_KEY))
        retina_width = _required_int(entries, RETINA_WIDTH_KEY)
        retina_height = _required_int(entries, RETINA_HEIGHT_KEY)

        # pre-defined retina resolution
        resolutions = {resolution_key(retina_width, retina_height): RETINA_SCREEN}
        font_sizes = {
            NORMAL_SCREEN: normal_font_size,
            RETINA_SCREEN: retina_font_size,
        }

        # Sorted so that a screen name shared by several resolutions
        # always takes its font size from the same entry.
        for key in sorted(entries):
            debug.debug_print(f"[config] found key: {key}")
            if not key.startswith(RESOLUTION_PREFIX):
                continue

            resolution = key[len(RESOLUTION_PREFIX):]
            if not _RESOLUTION_RE.match(resolution):
                debug.debug_print(f"[config] skipping malformed resolution key: {key}")
                continue

            screen_name = entries[key].strip()
            if not screen_name:
                raise ConfigurationError(f"Resolution '{key}' has no screen name")

            resolutions[resolution.lower()] = screen_name
            debug.debug_print(f"[config] found screenName: {screen_name}")

            if screen_name not in font_sizes:
                font_size_key = screen_name + FONTSIZE_SUFFIX
                raw = entries.get(font_size_key)
                font_size = normal_font_size if raw in (None, "") else _font_size(font_size_key, raw)
                font_sizes[screen_name] = font_size
                debug.debug_print(f"[config] found screen: '{screen_name}', font size: {font_size}")

        return cls(resolutions, font_sizes, normal_font_size)

    def screen_name_for(self, bounds):
        return self._resolutions.get(ScreenBounds(*bounds).resolution_key, NORMAL_SCREEN)

    def font_size_for_screen(self, screen_name):
        return self._font_sizes.get(screen_name, self.normal_font_size)

    def font_size_for(self, bounds):
        """Font size for a (width, height) sample; unknown sizes fall back to normal."""
        return self.font_size_for_screen(self.screen_name_for(bounds))

    def __repr__(self):
        return (f"FontTables(resolutions={dict(self._resolutions)!r}, "
                f"font_sizes={dict(self._font_sizes)!r})")
