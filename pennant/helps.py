"""
Help rendering for declared flags.

Layout
    <description>

      --port, -p
        Port to listen on.
        Default: 8080

      --verbose, -v
        Print more.

- the description section comes first, then one block per visible declaration,
  every section separated by a blank line; empty sections are omitted.
- names sit at indent 2, description lines and the default at indent 4; extra lines
  of a multi-line default are indented 8.
- defaults are obtained by invoking the declaration's supplier and serialized with
  rich.pretty.pretty_repr.

Palette keys
- primary: flag names
- secondary: description lines and the "Default:" label

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- With colorful=False the plain text is returned; styling never changes content.
"""
import io
from collections import defaultdict

from rich.console import Console
from rich.pretty import pretty_repr
from rich.text import Text


def _tab(count=1):
    return "  " * max(count, 1)


def _palette(colorful):
    styles = defaultdict(str, {
        "primary": "bold #00E6FF",
        "secondary": "#9CA3AF",
    } | getattr(__import__("__main__"), "__styles__", {}))
    return lambda style: styles[style] if colorful else ""


def _block(declaration, styler):
    lines = []

    names = ["--" + declaration.long_name]
    if declaration.short_name:
        names.append("-" + declaration.short_name)
    lines.append(Text.assemble(_tab(1), Text(", ").join(Text(name, styler("primary")) for name in names)))

    for line in declaration.description:
        lines.append(Text.assemble(_tab(2), (line, styler("secondary"))))

    if declaration.default is not None:
        first, *rest = pretty_repr(declaration.default()).split("\n")
        lines.append(Text.assemble(_tab(2), ("Default: ", styler("secondary")), first))
        lines.extend(Text.assemble(_tab(4), line) for line in rest)

    return Text("\n").join(lines)


def _ansi(text):
    console = Console(file=io.StringIO(), force_terminal=True, color_system="truecolor", width=1 << 16)
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True, highlight=False)
    return capture.get()


def render(description, declarations, /, *, colorful=False):
    """
    render the help message for the given declarations.

    parameters
    - description: str | None, printed first when non-empty.
    - declarations: Iterable[FlagDeclaration] or a mapping of them, in display order;
      declarations with exclude_from_help are skipped.
    - colorful: style names and descriptions with ANSI escapes.

    returns
    - str without leading or trailing blank lines.
    """
    if hasattr(declarations, "values"):
        declarations = declarations.values()

    styler = _palette(colorful)

    sections = []
    if description and description.strip():
        sections.append(Text(description.strip()))

    sections.extend(_block(declaration, styler) for declaration in declarations if not declaration.exclude_from_help)

    help = Text("\n\n").join(sections)
    return _ansi(help) if colorful else help.plain


__all__ = ("render",)
