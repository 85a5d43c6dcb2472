# style/__init__.py

from .definitions import (
    Alignment,
    BorderGlyphs,
    BorderType,
    Color,
    Margin,
    Modifier,
    Padding,
    StyleDefinitions,
)
from .state import StyleState
from .parser import Parser
from .renderer import Renderer

__all__ = [
    'Alignment', 'BorderGlyphs', 'BorderType', 'Color', 'Margin', 'Modifier',
    'Padding', 'StyleDefinitions', 'StyleState', 'Parser', 'Renderer',
]
