# style/parser.py

import re
from typing import Any, Callable, Dict, Optional

from ..logger import Logger
from .definitions import MAX_WIDTH, Modifier, StyleDefinitions
from .state import StyleState

_WIDTH_RE = re.compile(r'w-(\d+)', re.ASCII)


class Parser:
    """
    Turns a utility string such as ``"text-red bold p-2"`` into a StyleState.

    Tokens are applied left to right; a later token of the same kind wins,
    except modifiers which accumulate. Unknown tokens never fail the parse:
    they are reported through the logger and the optional ``on_unknown``
    callback, then ignored.
    """

    def __init__(
        self,
        definitions: Optional[StyleDefinitions] = None,
        logger: Optional[Logger] = None,
        on_unknown: Optional[Callable[[str], None]] = None,
    ):
        self.definitions = definitions or StyleDefinitions()
        self.logger = logger or Logger(__name__)
        self.on_unknown = on_unknown

    def parse(self, utility_str: str) -> StyleState:
        """Parse a utility string into a fresh StyleState."""
        return StyleState().merged(self.overrides(utility_str))

    def overrides(self, utility_str: str) -> Dict[str, Any]:
        """Return only the StyleState fields the utility string sets."""
        fields: Dict[str, Any] = {}
        for token in (utility_str or "").split(' '):
            self._apply_token(token, fields)
        return fields

    def _apply_token(self, token: str, fields: Dict[str, Any]) -> None:
        defs = self.definitions

        if token.startswith('text-'):
            color = defs.get_color(token[5:])
            if color is None:
                self._unknown(token)
            else:
                fields['text_color'] = color
        elif token.startswith('bg-'):
            color = defs.get_color(token[3:])
            if color is None:
                self._unknown(token)
            else:
                fields['bg_color'] = color
        elif token in defs.padding:
            fields['padding'] = defs.padding[token]
        elif token in defs.margin:
            fields['margin'] = defs.margin[token]
        elif token in defs.modifiers:
            fields['modifiers'] = fields.get('modifiers', Modifier.NONE) | defs.modifiers[token]
        elif token in defs.borders:
            fields['border'] = defs.borders[token]
        elif token in defs.alignments:
            fields['alignment'] = defs.alignments[token]
        elif token == 'w-full':
            fields['width_full'] = True
        elif token.startswith('w-'):
            width = self._width_value(token)
            if width is None:
                self._unknown(token)
            else:
                # w-0 means natural width
                fields['width'] = width or None
        elif token:
            self._unknown(token)

    @staticmethod
    def _width_value(token: str) -> Optional[int]:
        match = _WIDTH_RE.fullmatch(token)
        if match is None:
            return None
        digits = match.group(1).lstrip('0') or '0'
        # int() refuses very long digit strings, so compare lengths first
        if len(digits) > len(str(MAX_WIDTH)) or int(digits) > MAX_WIDTH:
            return None
        return int(digits)

    def _unknown(self, token: str) -> None:
        self.logger.debug(f"Unknown utility: {token}")
        if self.on_unknown is not None:
            self.on_unknown(token)
