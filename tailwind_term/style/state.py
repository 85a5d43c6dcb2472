# style/state.py

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .definitions import Alignment, BorderType, Color, Margin, Modifier, Padding


@dataclass(frozen=True)
class StyleState:
    """
    Resolved style attributes for a single render.

    A fresh instance is the default style: no colors, no modifiers, zero
    padding and margin, no border, left alignment, natural width.
    """
    text_color: Color = Color.DEFAULT
    bg_color: Color = Color.DEFAULT
    modifiers: Modifier = Modifier.NONE
    padding: Padding = Padding.P0
    margin: Margin = Margin.M0
    border: BorderType = BorderType.NONE
    alignment: Alignment = Alignment.LEFT
    width: Optional[int] = None
    width_full: bool = False

    def has_text_color(self) -> bool:
        return self.text_color != Color.DEFAULT

    def has_bg_color(self) -> bool:
        return self.bg_color != Color.DEFAULT

    def has_border(self) -> bool:
        return self.border != BorderType.NONE

    def has_modifier(self, modifier: Modifier) -> bool:
        return bool(self.modifiers & modifier)

    def has_width(self) -> bool:
        """True when the width stage has something to do."""
        return bool(self.width) or self.width_full

    def merged(self, overrides: Mapping[str, Any]) -> "StyleState":
        """
        Return a copy with the given fields replaced.

        Modifier flags are OR-ed into the existing ones instead of
        replacing them.
        """
        changes = dict(overrides)
        if 'modifiers' in changes:
            changes['modifiers'] = self.modifiers | changes['modifiers']
        return replace(self, **changes)
