"""
Application configuration and constants.
"""


# App Info & Config
APP_NAME = "Font Autosize"
APP_VERSION = "1.0.0"
COMPONENT_NAME = "FontSizeAutoChange"

# Polling (the first tick also waits one full interval)
POLL_INTERVAL_MS = 5000

# Bundled font configuration
PROPERTIES_FILE = "fontsize.properties"

# Required keys
NORMAL_FONT_SIZE_KEY = "normalFontSize"
RETINA_FONT_SIZE_KEY = "retinaFontSize"
RETINA_WIDTH_KEY = "retinaWidth"
RETINA_HEIGHT_KEY = "retinaHeight"
REQUIRED_KEYS = (
    NORMAL_FONT_SIZE_KEY,
    RETINA_FONT_SIZE_KEY,
    RETINA_WIDTH_KEY,
    RETINA_HEIGHT_KEY,
)

# resolution.{width}x{height}={screen-name}
RESOLUTION_PREFIX = "resolution."
# {screen-name}FontSize={fontSize}
FONTSIZE_SUFFIX = "FontSize"

# Screen names that always exist
NORMAL_SCREEN = "normal"
RETINA_SCREEN = "retina"
