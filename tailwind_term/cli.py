# cli.py

import argparse
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from rich.console import Console
from rich.table import Table

from .config import Settings
from .demo import run_demo
from .style import Modifier
from .terminal import FixedWidth
from .text import Tailwind

REPL_SAMPLE = "The quick brown fox"


def positive_int(value: str) -> int:
    """argparse type for column counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tailwind-term',
        description='Style terminal text with utility tokens')
    parser.add_argument('--debug',
        action='store_true',
        help='Log unknown utilities')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    parser.add_argument('--width',
        type=positive_int,
        help='Pretend the terminal has this many columns')

    commands = parser.add_subparsers(dest='command', required=True)

    render = commands.add_parser('render', help='Print styled text')
    render.add_argument('text', help='Text to style')
    render.add_argument('-u', '--utilities', default='',
        help='Space separated utilities, e.g. "text-red bold border"')

    inspect = commands.add_parser('inspect', help='Show how utilities are parsed')
    inspect.add_argument('utilities', help='Space separated utilities')

    commands.add_parser('demo', help='Run the showcase')

    repl = commands.add_parser('repl', help='Try utilities interactively')
    repl.add_argument('--text', default=REPL_SAMPLE, help='Sample text to style')
    return parser


def make_tailwind(args: argparse.Namespace) -> Tailwind:
    settings = Settings.from_env()
    if args.debug:
        settings.debug = True
    if args.log_file:
        settings.log_file = args.log_file
    width_source = FixedWidth(args.width) if args.width is not None else None
    return Tailwind(settings, width_source=width_source)


def inspect_table(tailwind: Tailwind, utilities: str) -> Table:
    """Tabulate the StyleState produced by a utility string."""
    unknown: List[str] = []
    previous = tailwind.parser.on_unknown

    def collect(token: str) -> None:
        unknown.append(token)
        if previous is not None:
            previous(token)

    tailwind.parser.on_unknown = collect
    try:
        style = tailwind.parse(utilities)
    finally:
        tailwind.parser.on_unknown = previous

    table = Table(title=f'"{utilities}"', show_header=True)
    table.add_column("attribute", style="bold")
    table.add_column("value")
    table.add_row("text color", style.text_color.name.lower())
    table.add_row("background", style.bg_color.name.lower())
    modifiers = [m.name.lower() for m in Modifier if m and style.has_modifier(m)]
    table.add_row("modifiers", ", ".join(modifiers) or "-")
    table.add_row("padding", str(int(style.padding)))
    table.add_row("margin", str(int(style.margin)))
    table.add_row("border", style.border.value)
    table.add_row("alignment", style.alignment.value)
    table.add_row("width", "full" if style.width_full and not style.width else str(style.width or "auto"))
    table.add_row("unknown", ", ".join(unknown) or "-")
    return table


def run_repl(tailwind: Tailwind, sample: str) -> None:
    """Read utility strings and print the sample rendered with each."""
    completer = WordCompleter(tailwind.definitions.keywords(), sentence=True)
    session = PromptSession(completer=completer, complete_while_typing=True)
    tailwind.prepare_output()
    while True:
        try:
            utilities = session.prompt('tw> ')
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if utilities.strip() in ('exit', 'quit'):
            break
        sys.stdout.write(tailwind.tw(sample, utilities) + "\n")
        sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    tailwind = make_tailwind(args)
    console = Console(highlight=False)

    try:
        if args.command == 'render':
            tailwind.print(args.text, args.utilities)
            sys.stdout.write("\n")
        elif args.command == 'inspect':
            console.print(inspect_table(tailwind, args.utilities))
        elif args.command == 'demo':
            run_demo(tailwind, console)
        elif args.command == 'repl':
            run_repl(tailwind, args.text)
    except KeyboardInterrupt:
        print("\nExiting...")
    return 0


if __name__ == '__main__':
    sys.exit(main())
