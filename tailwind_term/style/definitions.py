# style/definitions.py

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from types import MappingProxyType
from typing import Mapping


class Color(IntEnum):
    """ANSI color index; foreground is 30 + value, background 40 + value."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9


class Modifier(IntFlag):
    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    UNDERLINE = 1 << 2
    BLINK = 1 << 3
    REVERSE = 1 << 4
    HIDDEN = 1 << 5


class BorderType(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Padding(IntEnum):
    P0 = 0
    P1 = 1
    P2 = 2
    P3 = 3
    P4 = 4


class Margin(IntEnum):
    M0 = 0
    M1 = 1
    M2 = 2


@dataclass(frozen=True)
class BorderGlyphs:
    """Box-drawing characters for one border type."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


BORDER_GLYPHS: Mapping[BorderType, BorderGlyphs] = MappingProxyType({
    BorderType.SINGLE: BorderGlyphs('┌', '┐', '└', '┘', '─', '│'),
    BorderType.DOUBLE: BorderGlyphs('╔', '╗', '╚', '╝', '═', '║'),
    BorderType.ROUNDED: BorderGlyphs('╭', '╮', '╰', '╯', '─', '│'),
})

# SGR codes in the order they are emitted
MODIFIER_CODES = (
    (Modifier.BOLD, 1),
    (Modifier.DIM, 2),
    (Modifier.UNDERLINE, 4),
    (Modifier.BLINK, 5),
    (Modifier.REVERSE, 7),
    (Modifier.HIDDEN, 8),
)

ELLIPSIS = "..."

# Widest explicit w-<n> accepted; larger values are unknown utilities
MAX_WIDTH = 65535


class StyleDefinitions:
    """
    Read-only token tables that map utility text to style values.

    The defaults are shared module-level mappings; a custom set of tables can
    be supplied for tests or for projects that want extra aliases.
    """

    _default_colors = MappingProxyType({
        'black': Color.BLACK,
        'red': Color.RED,
        'green': Color.GREEN,
        'yellow': Color.YELLOW,
        'blue': Color.BLUE,
        'magenta': Color.MAGENTA,
        'cyan': Color.CYAN,
        'white': Color.WHITE,
    })

    _default_padding = MappingProxyType({
        f'p-{level.value}': level for level in Padding
    })

    _default_margin = MappingProxyType({
        f'm-{level.value}': level for level in Margin
    })

    _default_modifiers = MappingProxyType({
        'bold': Modifier.BOLD,
        'dim': Modifier.DIM,
        'underline': Modifier.UNDERLINE,
        'blink': Modifier.BLINK,
        'reverse': Modifier.REVERSE,
        'hidden': Modifier.HIDDEN,
    })

    _default_borders = MappingProxyType({
        'border': BorderType.SINGLE,
        'border-double': BorderType.DOUBLE,
        'border-rounded': BorderType.ROUNDED,
    })

    _default_alignments = MappingProxyType({
        'left': Alignment.LEFT,
        'center': Alignment.CENTER,
        'right': Alignment.RIGHT,
    })

    def __init__(
        self,
        colors: Mapping[str, Color] = None,
        padding: Mapping[str, Padding] = None,
        margin: Mapping[str, Margin] = None,
        modifiers: Mapping[str, Modifier] = None,
        borders: Mapping[str, BorderType] = None,
        alignments: Mapping[str, Alignment] = None,
    ):
        self.colors = self._freeze(colors, self._default_colors)
        self.padding = self._freeze(padding, self._default_padding)
        self.margin = self._freeze(margin, self._default_margin)
        self.modifiers = self._freeze(modifiers, self._default_modifiers)
        self.borders = self._freeze(borders, self._default_borders)
        self.alignments = self._freeze(alignments, self._default_alignments)

        keyword_tables = (self.padding, self.margin, self.modifiers,
                          self.borders, self.alignments)
        seen = set()
        for table in keyword_tables:
            overlap = seen.intersection(table)
            if overlap:
                raise ValueError(f"Duplicate utility tokens: {sorted(overlap)}")
            seen.update(table)

    @staticmethod
    def _freeze(custom, default):
        return default if custom is None else MappingProxyType(dict(custom))

    def get_color(self, name: str):
        """Return the color for a bare color name, or None."""
        return self.colors.get(name)

    def get_border_glyphs(self, border: BorderType) -> BorderGlyphs:
        """Return the glyph set for a border type."""
        return BORDER_GLYPHS.get(border, BORDER_GLYPHS[BorderType.SINGLE])

    def keywords(self):
        """All recognised exact-match and prefixed utility tokens."""
        words = [f'text-{name}' for name in self.colors]
        words += [f'bg-{name}' for name in self.colors]
        for table in (self.padding, self.margin, self.modifiers,
                      self.borders, self.alignments):
            words.extend(table)
        words.append('w-full')
        return words
