import pytest

from font_autosize.core.errors import ConfigurationError, ResourceNotFoundError
from font_autosize.core.properties import load_properties, parse_properties


def test_parse_properties_basic_pairs():
    text = "normalFontSize=12\nretinaFontSize = 16\nresolution.1920x1080=dell\n"
    assert parse_properties(text) == {
        "normalFontSize": "12",
        "retinaFontSize": "16",
        "resolution.1920x1080": "dell",
    }


def test_parse_properties_keeps_key_case():
    entries = parse_properties("dellFontSize=14\nResolution.1920X1080=Dell\n")
    assert "dellFontSize" in entries
    assert entries["Resolution.1920X1080"] == "Dell"


def test_parse_properties_comments_and_blank_lines():
    text = "# comment\n! also a comment\n\nretinaWidth=2560\n"
    assert parse_properties(text) == {"retinaWidth": "2560"}


def test_parse_properties_colon_separator():
    assert parse_properties("retinaHeight: 1600") == {"retinaHeight": "1600"}


def test_parse_properties_last_duplicate_wins():
    assert parse_properties("normalFontSize=12\nnormalFontSize=13\n") == {"normalFontSize": "13"}


def test_parse_properties_key_without_value():
    assert parse_properties("samsungFontSize\n") == {"samsungFontSize": ""}


def test_parse_properties_indented_key_is_its_own_entry():
    text = "normalFontSize=12\n  retinaFontSize=16\n\tretinaWidth=2560\nretinaHeight=1600\n"
    assert parse_properties(text) == {
        "normalFontSize": "12",
        "retinaFontSize": "16",
        "retinaWidth": "2560",
        "retinaHeight": "1600",
    }


def test_parse_properties_backslash_joins_lines():
    text = "resolution.1920x1080=\\\n    dell\ndellFontSize=1\\\n  4\n"
    assert parse_properties(text) == {"resolution.1920x1080": "dell", "dellFontSize": "14"}


def test_parse_properties_escaped_backslash_ends_line():
    text = "label=a\\\\\nnext=b\n"
    entries = parse_properties(text)
    assert sorted(entries) == ["label", "next"]
    assert entries["next"] == "b"


def test_parse_properties_comment_is_not_continued():
    text = "# note \\\nnormalFontSize=12\n"
    assert parse_properties(text) == {"normalFontSize": "12"}


def test_parse_properties_percent_is_literal():
    assert parse_properties("label=100%\n") == {"label": "100%"}


def test_load_properties_reads_file(tmp_path):
    path = tmp_path / "fontsize.properties"
    path.write_text("normalFontSize=12\nretinaFontSize=16\n", encoding="utf-8")
    assert load_properties(str(path)) == {"normalFontSize": "12", "retinaFontSize": "16"}


def test_load_properties_missing_file(tmp_path):
    missing = tmp_path / "nope.properties"
    with pytest.raises(ResourceNotFoundError) as excinfo:
        load_properties(str(missing))
    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value, ConfigurationError)
