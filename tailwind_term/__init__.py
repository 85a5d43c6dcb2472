# __init__.py

from .config import Settings
from .logger import Logger
from .style import (
    Alignment,
    BorderType,
    Color,
    Margin,
    Modifier,
    Padding,
    Parser,
    Renderer,
    StyleDefinitions,
    StyleState,
)
from .terminal import TerminalWidth, enable_ansi
from .text import Tailwind, Text, get_default, set_default, tw, tw_print

__all__ = [
    "Tailwind", "Text", "tw", "tw_print", "get_default", "set_default",
    "Parser", "Renderer", "StyleState", "StyleDefinitions",
    "Color", "Modifier", "BorderType", "Alignment", "Padding", "Margin",
    "TerminalWidth", "enable_ansi", "Settings", "Logger",
]
