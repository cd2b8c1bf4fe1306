#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    """Configuration for the demo harness and its animation."""
    supports_utf8: bool = True
    frame_delay: float = 0.02
    curve_amplitude: float = 0.1
    curve_rate: float = 0.01
    amplitude_limit: float = 0.5
    bitmap_path: Optional[str] = None

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks the LC_ALL, LC_CTYPE and LANG locale variables, in that order.
        """
        locale_name = (os.environ.get('LC_ALL')
                       or os.environ.get('LC_CTYPE')
                       or os.environ.get('LANG', ''))
        locale_name = locale_name.lower()
        supports_utf8 = 'utf-8' in locale_name or 'utf8' in locale_name
        return cls(supports_utf8=supports_utf8)
