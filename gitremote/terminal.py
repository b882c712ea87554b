"""
Terminal output: colors and OSC 8 hyperlinks
"""

import os
import sys
from enum import Enum
from typing import Optional

from .environment import EnvironmentDescriptor


# OSC 8 hyperlink framing: ESC ] 8 ; params ; URI BEL
OSC = "\x1b]"
BEL = "\x07"
HYPERLINK = "8"
SEP = ";"

# TERM_PROGRAM value of the VS Code integrated terminal
VSCODE_TERM_PROGRAM = "vscode"


class ColorMode(Enum):
    """Color output modes"""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class LinkMode(Enum):
    """Hyperlink output modes"""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class TerminalColors:
    """ANSI color codes"""
    FG_RED = "\033[31m"

    BOLD = "\033[1m"

    RESET = "\033[0m"


def detect_link_support(env: EnvironmentDescriptor) -> bool:
    """Check whether the terminal renders OSC 8 hyperlinks"""
    # VS Code integrated terminal
    if env.term_program == VSCODE_TERM_PROGRAM:
        return True

    # Windows Terminal
    if env.wt_session:
        return True

    return False


def render_link(text: str, url: str, supported: bool) -> str:
    """
    Render a clickable terminal link

    Args:
        text: Visible link text
        url: Link target
        supported: Whether the terminal understands OSC 8

    Returns:
        ``text`` wrapped in OSC 8 escapes, or the bare ``url`` when
        hyperlinks are unsupported
    """
    if not supported:
        return url

    return ''.join([OSC, HYPERLINK, SEP, SEP, url, BEL,
                    text,
                    OSC, HYPERLINK, SEP, SEP, BEL])


def hyperlinks_enabled(mode: LinkMode, env: EnvironmentDescriptor) -> bool:
    """Resolve a LinkMode against the environment"""
    if mode == LinkMode.ALWAYS:
        return True
    if mode == LinkMode.NEVER:
        return False
    return detect_link_support(env)


class Terminal:
    """Terminal output manager with color support"""

    _color_mode: ColorMode = ColorMode.AUTO
    _color_enabled: Optional[bool] = None

    @classmethod
    def set_color_mode(cls, mode: ColorMode) -> None:
        """Set color output mode"""
        cls._color_mode = mode
        cls._color_enabled = None  # Reset cached value

    @staticmethod
    def parse_color_mode(mode_str: str) -> ColorMode:
        """Parse color mode string"""
        mode_str = mode_str.lower()
        if mode_str == "always":
            return ColorMode.ALWAYS
        elif mode_str == "never":
            return ColorMode.NEVER
        else:
            return ColorMode.AUTO

    @staticmethod
    def parse_link_mode(mode_str: str) -> LinkMode:
        """Parse hyperlink mode string"""
        mode_str = mode_str.lower()
        if mode_str == "always":
            return LinkMode.ALWAYS
        elif mode_str == "never":
            return LinkMode.NEVER
        else:
            return LinkMode.AUTO

    @classmethod
    def is_color_enabled(cls) -> bool:
        """Check if color output is enabled"""
        if cls._color_enabled is not None:
            return cls._color_enabled

        if cls._color_mode == ColorMode.ALWAYS:
            cls._color_enabled = True
        elif cls._color_mode == ColorMode.NEVER:
            cls._color_enabled = False
        else:  # AUTO
            cls._color_enabled = sys.stderr.isatty()

            if os.environ.get('NO_COLOR'):
                cls._color_enabled = False

            term = os.environ.get('TERM', '')
            if term == 'dumb' or not term:
                cls._color_enabled = False

        return cls._color_enabled

    @classmethod
    def colorize(cls, text: str, *codes: str) -> str:
        """Apply color codes to text"""
        if not cls.is_color_enabled():
            return text

        prefix = ''.join(codes)
        return f"{prefix}{text}{TerminalColors.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error message"""
        return cls.colorize(text, TerminalColors.FG_RED, TerminalColors.BOLD)

