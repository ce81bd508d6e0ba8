#!/usr/bin/env python3
"""
Font Autosize - Main Entry Point

Adjusts editor and console font sizes to the resolution of the screen the
window is on, using the lookup table in fontsize.properties.
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from font_autosize.app import main


if __name__ == "__main__":
    main()
