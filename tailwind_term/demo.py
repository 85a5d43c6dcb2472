# demo.py

from typing import List, Optional, Tuple

from rich.console import Console

from .text import Tailwind, get_default

Sample = Tuple[str, str]

SECTIONS: List[Tuple[str, List[Sample]]] = [
    ("Text Colors", [
        ("Black text", "text-black"),
        ("Red text", "text-red"),
        ("Green text", "text-green"),
        ("Yellow text", "text-yellow"),
        ("Blue text", "text-blue"),
        ("Magenta text", "text-magenta"),
        ("Cyan text", "text-cyan"),
        ("White text", "text-white"),
    ]),
    ("Background Colors", [
        ("Black background", "bg-black text-white"),
        ("Red background", "bg-red text-white"),
        ("Green background", "bg-green text-white"),
        ("Yellow background", "bg-yellow text-black"),
        ("Blue background", "bg-blue text-white"),
        ("Magenta background", "bg-magenta text-white"),
        ("Cyan background", "bg-cyan text-black"),
        ("White background", "bg-white text-black"),
    ]),
    ("Text Modifiers", [
        ("Bold text", "bold"),
        ("Underlined text", "underline"),
        ("Dim text", "dim"),
        ("Blinking text", "blink"),
        ("Reversed colors", "reverse text-red bg-white"),
        ("Hidden text", "hidden"),
    ]),
    ("Padding", [
        ("No padding", "text-cyan"),
        ("p-1", "text-cyan p-1"),
        ("p-2", "text-cyan p-2"),
        ("p-3", "text-cyan p-3"),
        ("p-4", "text-cyan p-4"),
    ]),
    ("Borders", [
        ("Simple border", "border p-2"),
        ("Double border", "border-double p-2 text-green"),
        ("Rounded border", "border-rounded p-2 text-yellow"),
    ]),
    ("Alignment", [
        ("Left aligned (default)", "text-blue"),
        ("Center aligned", "center text-green"),
        ("Right aligned", "right text-magenta"),
    ]),
    ("Width Control", [
        ("Auto width", "text-cyan border"),
        ("Width 20", "w-20 text-green border"),
        ("Width 40", "w-40 text-yellow border"),
        ("Full width", "w-full text-magenta border"),
    ]),
    ("Combinations", [
        ("Styled box", "text-white bg-blue bold border p-2 center"),
        ("Alert style", "text-yellow bg-red bold border-double p-3 center"),
        ("Success style", "text-green bg-black bold border-rounded p-2"),
    ]),
    ("Margin", [
        ("First line with margin", "m-1 text-cyan border"),
        ("Second line with margin", "m-1 text-green border"),
    ]),
    ("Error Tolerance", [
        ("Valid + invalid", "text-red bg-blue invalid-utility another-bad-one"),
        ("Only invalid", "not-a-real-style completely-fake"),
    ]),
    ("Multi-block Layout", [
        ("TAILWIND TERM DEMO", "text-white bg-blue bold border center w-full p-2"),
        ("Feature 1: Colors", "text-green border p-1 m-1"),
        ("Feature 2: Borders", "text-yellow border-double p-1 m-1"),
        ("Feature 3: Alignment", "text-cyan border-rounded p-1 m-1 center"),
        ("End of demo", "text-white bg-magenta bold border center w-full p-1"),
    ]),
]


def run_demo(tailwind: Optional[Tailwind] = None, console: Optional[Console] = None) -> None:
    """Print every showcase section, then the chained-call example."""
    tailwind = tailwind or get_default()
    console = console or Console(highlight=False)
    tailwind.prepare_output()

    console.rule("[bold]Tailwind Term Demonstration")
    for title, samples in SECTIONS:
        console.print()
        console.rule(title, align="left")
        for text, utilities in samples:
            _emit(console, tailwind.tw(text, utilities))

    console.print()
    console.rule("Chainable API", align="left")
    _emit(console, tailwind.text("Hello").tw("text-red bold").render())
    _emit(console, tailwind.text("World").tw("bg-blue text-white").tw("p-2 border").render())
    console.print()
    console.rule("End of Demo")


def _emit(console: Console, rendered: str) -> None:
    # Pre-rendered ANSI goes straight to the stream so rich does not escape it
    console.file.write(rendered + "\n")
    console.file.flush()
