"""
Appearance schemes for the host window.

Each scheme is a Qt stylesheet template filled in with the editor and
console font sizes, so re-applying a scheme re-renders every widget at the
current size.
"""

DEFAULT_SCHEME = "light"

SCHEMES = {
    "light": """
        QWidget {{
            background-color: #ffffff;
            color: #1e1e1e;
            font-size: {font_size}pt;
        }}
        QPlainTextEdit#editor {{
            background-color: #fdfdfd;
            border: 1px solid #d0d0d0;
            font-size: {font_size}pt;
        }}
        QPlainTextEdit#console {{
            background-color: #f3f3f3;
            border: 1px solid #d0d0d0;
            font-size: {console_font_size}pt;
        }}
        QLabel#status {{
            color: #666;
        }}
        QComboBox {{
            background-color: white;
            border: 2px solid #dee2e6;
            border-radius: 4px;
            padding: 4px 8px;
        }}
    """,
    "dark": """
        QWidget {{
            background-color: #1e1e1e;
            color: #d4d4d4;
            font-size: {font_size}pt;
        }}
        QPlainTextEdit#editor {{
            background-color: #252526;
            border: 1px solid #3c3c3c;
            font-size: {font_size}pt;
        }}
        QPlainTextEdit#console {{
            background-color: #181818;
            border: 1px solid #3c3c3c;
            font-size: {console_font_size}pt;
        }}
        QLabel#status {{
            color: #9d9d9d;
        }}
        QComboBox {{
            background-color: #3c3c3c;
            border: 2px solid #555;
            border-radius: 4px;
            padding: 4px 8px;
        }}
    """,
}


def get_scheme_style(name, font_size, console_font_size):
    """Get the stylesheet of a scheme for the given font sizes."""
    try:
        template = SCHEMES[name]
    except KeyError:
        raise ValueError(f"Unknown scheme: {name}") from None
    return template.format(font_size=font_size, console_font_size=console_font_size)
