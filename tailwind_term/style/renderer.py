# style/renderer.py

from typing import Optional, Protocol

from .definitions import (
    ELLIPSIS,
    MODIFIER_CODES,
    Alignment,
    Margin,
    Padding,
    StyleDefinitions,
)
from .state import StyleState

ESC = '\033['
RESET = f'{ESC}0m'


class WidthSource(Protocol):
    """Anything that can report the terminal column count."""
    @property
    def width(self) -> int: ...


class Renderer:
    """
    Renders raw text with a StyleState through a fixed pipeline:

    width -> padding -> border -> alignment -> margin -> ANSI

    Every stage takes the previous stage's output. Character counting
    happens before any escape code is added, so the ANSI stage is last.
    """

    def __init__(self, width_source: WidthSource, definitions: Optional[StyleDefinitions] = None):
        self.width_source = width_source
        self.definitions = definitions or StyleDefinitions()

    def render(self, text: str, style: StyleState) -> str:
        """Return the fully styled string."""
        result = self.apply_width(text, style)
        result = self.apply_padding(result, style)
        result = self.apply_border(result, style)
        result = self.apply_alignment(result, style)
        result = self.apply_margin(result, style)
        return self.apply_ansi(result, style)

    def apply_width(self, text: str, style: StyleState) -> str:
        """Pad or truncate to exactly the target width."""
        if not style.has_width():
            return text

        target = style.width if style.width else self.width_source.width
        if len(text) <= target:
            return text.ljust(target)
        if target < len(ELLIPSIS):
            return ELLIPSIS[:target]
        return text[:target - len(ELLIPSIS)] + ELLIPSIS

    def apply_padding(self, text: str, style: StyleState) -> str:
        """Horizontal padding only; the text stays on one line."""
        if style.padding == Padding.P0:
            return text
        pad = ' ' * int(style.padding)
        return f'{pad}{text}{pad}'

    def apply_border(self, text: str, style: StyleState) -> str:
        """Wrap a single line of text in a three-line box."""
        if not style.has_border():
            return text

        glyphs = self.definitions.get_border_glyphs(style.border)
        edge = glyphs.horizontal * (len(text) + 2)
        return '\n'.join((
            f'{glyphs.top_left}{edge}{glyphs.top_right}',
            f'{glyphs.vertical} {text} {glyphs.vertical}',
            f'{glyphs.bottom_left}{edge}{glyphs.bottom_right}',
        ))

    def apply_alignment(self, text: str, style: StyleState) -> str:
        """Shift a single line right; multi-line blocks are left alone."""
        if style.alignment == Alignment.LEFT or '\n' in text:
            return text

        term_width = self.width_source.width
        if len(text) >= term_width:
            return text

        gap = term_width - len(text)
        if style.alignment == Alignment.CENTER:
            gap //= 2
        return ' ' * gap + text

    def apply_margin(self, text: str, style: StyleState) -> str:
        """Surround the block with blank lines."""
        if style.margin == Margin.M0:
            return text
        lines = '\n' * int(style.margin)
        return f'{lines}{text}{lines}'

    def apply_ansi(self, text: str, style: StyleState) -> str:
        """Wrap the whole block in one SGR sequence and a reset."""
        return f'{self.sgr(style)}{text}{RESET}'

    @staticmethod
    def sgr(style: StyleState) -> str:
        """Build the opening escape sequence, e.g. ``\\033[1;31m``."""
        codes = [str(code) for flag, code in MODIFIER_CODES if style.has_modifier(flag)]
        if style.has_text_color():
            codes.append(str(30 + style.text_color))
        if style.has_bg_color():
            codes.append(str(40 + style.bg_color))
        return f"{ESC}{';'.join(codes)}m"
