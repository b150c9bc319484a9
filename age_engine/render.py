"""Terminal rendering of form results and errors.

Each theme maps the same style names (``age.accent``, ``age.muted``,
``age.error``) to different colours. Output is rendered into a StringIO
buffer and returned as text; with colour off it carries no escape codes.
"""

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme as RichTheme

from age_engine.models import AgeResult, FormField
from age_engine.theme import Theme

THEMES: dict[Theme, RichTheme] = {
    Theme.LIGHT: RichTheme(
        {
            "age.accent": "bold magenta",
            "age.muted": "bright_black",
            "age.error": "red",
        }
    ),
    Theme.DARK: RichTheme(
        {
            "age.accent": "bold bright_magenta",
            "age.muted": "white",
            "age.error": "bright_red",
        }
    ),
}

_FIELD_LABELS: dict[FormField, str] = {
    FormField.DAY: "Day",
    FormField.MONTH: "Month",
    FormField.YEAR: "Year",
}


def create_console(theme: Theme, *, colour: bool = True, width: int = 100) -> Console:
    """Create a Console that renders to a StringIO buffer under *theme*."""
    return Console(
        file=StringIO(),
        theme=THEMES[theme],
        force_terminal=colour,
        color_system="standard" if colour else None,
        no_color=not colour,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def render_result(result: AgeResult, theme: Theme, colour: bool = True) -> str:
    rows = [
        ("Years", str(result.years)),
        ("Months", str(result.months)),
        ("Days", str(result.days)),
        ("Next birthday", result.next_birthday.formatted),
        ("Total days lived", result.total_days_formatted),
    ]
    width = max(len(label) for label, _ in rows)
    console = create_console(theme, colour=colour)
    for label, value in rows:
        console.print(Text.assemble((label.ljust(width), "age.muted"), "  ", (value, "age.accent")))
    return get_output(console)


def render_errors(errors: dict[FormField, str], theme: Theme, colour: bool = True) -> str:
    console = create_console(theme, colour=colour)
    for field in FormField:
        if field in errors:
            console.print(Text(f"{_FIELD_LABELS[field]}: {errors[field]}", style="age.error"))
    return get_output(console)
