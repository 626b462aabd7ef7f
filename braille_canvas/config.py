#
# PROJECT: braille-canvas
# MODULE: braille_canvas/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Options for turning a canvas into text."""
    use_braille: bool = True

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille, so default off there
        return cls(use_braille=supports_utf8 and not (is_dumb or is_linux_console))
