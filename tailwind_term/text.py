# text.py

import sys
from itertools import count
from typing import Callable, Optional, TextIO

from .config import Settings
from .logger import Logger
from .style import Parser, Renderer, StyleDefinitions, StyleState
from .terminal import TerminalWidth, enable_ansi

_instance_ids = count(1)


class Tailwind:
    """
    Assembles the parser, renderer and terminal collaborators.

    Component Hierarchy:
    TerminalWidth (base) -> Renderer
    StyleDefinitions -> Parser
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        width_source=None,
        definitions: Optional[StyleDefinitions] = None,
        on_unknown: Optional[Callable[[str], None]] = None,
    ):
        self.settings = settings or Settings()
        # one logger per instance
        self.logger = Logger(f"{__name__}.{next(_instance_ids)}",
                             self.settings.debug, self.settings.log_file)
        self.definitions = definitions or StyleDefinitions()
        self.width_source = width_source or TerminalWidth(fallback=self.settings.fallback_width)
        self.parser = Parser(self.definitions, logger=self.logger, on_unknown=on_unknown)
        self.renderer = Renderer(self.width_source, self.definitions)
        self._ansi_ready = False

    def prepare_output(self) -> None:
        """Run the one-time terminal setup unless disabled."""
        if self.settings.enable_ansi and not self._ansi_ready:
            self._ansi_ready = enable_ansi()
            self.logger.debug("ANSI output enabled")

    def parse(self, utilities: str) -> StyleState:
        return self.parser.parse(utilities)

    def text(self, raw: str) -> "Text":
        """Create a Text bound to this instance."""
        return Text(raw, tailwind=self)

    def tw(self, raw: str, utilities: str = "") -> str:
        """Render raw text with a utility string."""
        self.prepare_output()
        return self.renderer.render(raw, self.parser.parse(utilities))

    def print(self, raw: str, utilities: str = "", file: Optional[TextIO] = None) -> None:
        """Render and write to stdout (or file)."""
        self.text(raw).tw(utilities).print(file=file)


class Text:
    """
    Raw text plus the style that will be applied to it.

    ``tw()`` is chainable. A later call overrides only the fields its
    utilities mention, so ``Text("x").tw("text-red").tw("p-2")`` keeps the
    red color; modifiers accumulate. Pass ``replace=True`` to discard the
    previous style instead.
    """

    def __init__(self, raw: str, style: Optional[StyleState] = None,
                 tailwind: Optional[Tailwind] = None):
        self.raw = raw
        self.style = style or StyleState()
        self._tailwind = tailwind

    @property
    def tailwind(self) -> Tailwind:
        return self._tailwind or get_default()

    def tw(self, utilities: str, replace: bool = False) -> "Text":
        parser = self.tailwind.parser
        if replace:
            self.style = parser.parse(utilities)
        else:
            self.style = self.style.merged(parser.overrides(utilities))
        return self

    def render(self) -> str:
        return self.tailwind.renderer.render(self.raw, self.style)

    def print(self, file: Optional[TextIO] = None) -> None:
        self.tailwind.prepare_output()
        out = file or sys.stdout
        out.write(self.render())
        out.flush()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Text({self.raw!r}, style={self.style!r})"


_default: Optional[Tailwind] = None


def get_default() -> Tailwind:
    """Return the shared instance, built from the environment on first use."""
    global _default
    if _default is None:
        _default = Tailwind(Settings.from_env())
    return _default


def set_default(tailwind: Optional[Tailwind]) -> None:
    """Replace (or with None, reset) the shared instance."""
    global _default
    _default = tailwind


def tw(raw: str, utilities: str = "") -> str:
    """Render raw text with a utility string using the shared instance."""
    return get_default().tw(raw, utilities)


def tw_print(raw: str, utilities: str = "", file: Optional[TextIO] = None) -> None:
    """Render and print raw text using the shared instance."""
    get_default().print(raw, utilities, file=file)
