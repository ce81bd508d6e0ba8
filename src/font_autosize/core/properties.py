"""
Reader for the properties-style font configuration.
"""
import os
from configparser import ConfigParser, Error as ConfigParserError
from ..utils import debug
from .errors import ConfigurationError, ResourceNotFoundError


# Properties files have no sections; the parser gets a synthetic one.
_SECTION = "properties"


def _new_parser():
    cfg = ConfigParser(
        delimiters=("=", ":"),
        comment_prefixes=("#", "!"),
        inline_comment_prefixes=None,
        interpolation=None,
        strict=False,
        allow_no_value=True,
        empty_lines_in_values=False,
    )
    # Keys such as normalFontSize are case-sensitive
    cfg.optionxform = str
    return cfg


def _logical_lines(text):
    """Join backslash-continued lines and drop leading whitespace, as properties files do."""
    lines = []
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None and line[:1] in ("#", "!"):
            lines.append(line)
            continue
        if pending is not None:
            line, pending = pending + line, None
        # an odd run of trailing backslashes continues the line
        backslashes = len(line) - len(line.rstrip("\\"))
        if backslashes % 2 == 1:
            pending = line[:-1]
            continue
        lines.append(line)
    if pending is not None:
        lines.append(pending)
    return lines


def parse_properties(text, source="<string>"):
    """Parse properties text into a flat dict of stripped strings.

    Later duplicates of a key replace earlier ones. A key without a value
    maps to the empty string. Indented lines are ordinary entries, and a
    trailing backslash joins a line with the next one.
    """
    cfg = _new_parser()
    body = "\n".join(_logical_lines(text))
    try:
        cfg.read_string(f"[{_SECTION}]\n{body}", source=source)
    except ConfigParserError as e:
        raise ConfigurationError(f"Malformed font configuration {source}: {e}") from e

    entries = {}
    for section in cfg.sections():
        for key, value in cfg.items(section, raw=True):
            entries[key] = (value or "").strip()
    return entries


def load_properties(path):
    """Load a properties file, raising ResourceNotFoundError when it is absent."""
    if not os.path.isfile(path):
        raise ResourceNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    entries = parse_properties(text, source=path)
    debug.debug_print(f"[config] loaded {len(entries)} keys from {path}")
    return entries
