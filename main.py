"""Entry point for the age calculator CLI.

Run with:
    python main.py                  # fill in the day/month/year form
    python main.py --toggle-theme   # switch between dark and light output
    python main.py --chat           # ask the Bedrock-backed agent instead

The script configures structured logging, restores the saved theme, prompts
for the three birth-date fields, and prints the exact age or the field
errors.  Invalid input exits with code 1.
"""

import argparse
import datetime
import json
import logging
import os
import sys
import time
import uuid

from age_engine import AgeForm
from age_engine.agent import create_agent, invoke_with_audit
from age_engine.config import settings
from age_engine.models import FormField
from age_engine.render import render_errors, render_result
from age_engine.theme import PreferenceStore, ThemeState

logger: logging.Logger = logging.getLogger(__name__)

_PROMPTS: tuple[tuple[FormField, str], ...] = (
    (FormField.DAY, "Day (DD): "),
    (FormField.MONTH, "Month (1-12): "),
    (FormField.YEAR, "Year (YYYY): "),
)


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output.
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate your exact age from your birth date.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--toggle-theme",
        action="store_true",
        help="Switch between dark and light output and remember the choice.",
    )
    mode.add_argument(
        "--chat",
        action="store_true",
        help="Ask the Bedrock-backed agent instead of filling in the form.",
    )
    return parser.parse_args(argv)


def _run_chat() -> None:
    agent = create_agent()
    question = input("Ask about your age (e.g. 'I was born on 1990-05-15'): ").strip()
    response = invoke_with_audit(agent, question)
    print(response)


def run(argv: list[str] | None = None) -> None:
    """Configure logging, restore the theme, and run the birth-date form.

    Each field is normalized as it is entered (single-digit days are padded,
    two-digit years expanded), then the whole form is submitted.  Field
    errors are printed and the process exits with code 1 so that callers
    (shell scripts, CI jobs, etc.) can detect failure cleanly.

    After a successful calculation a structured record is emitted via
    ``logger.info`` with session_id, timestamp (ISO UTC) and elapsed_ms.
    The birth date itself is never logged.
    """
    _configure_logging()
    args = _parse_args(argv)

    theme = ThemeState.load(PreferenceStore(settings.preferences_file), settings.prefers_dark)

    if args.toggle_theme:
        new_theme = theme.toggle()
        print(f"Theme set to {new_theme.value}.")
        return

    if args.chat:
        _run_chat()
        return

    form = AgeForm(min_year=settings.min_birth_year, leap_day_rule=settings.leap_day_rule)

    print("Welcome to the Age Calculator!")
    session_id = str(uuid.uuid4())
    start = time.monotonic()
    for field, prompt in _PROMPTS:
        form.set_field(field, input(prompt).strip())
        form.leave_field(field)

    result = form.submit()
    if result is None:
        print(render_errors(form.errors, theme.theme, colour=sys.stdout.isatty()))
        sys.exit(1)

    print(render_result(result, theme.theme, colour=sys.stdout.isatty()))
    elapsed_ms = (time.monotonic() - start) * 1000

    logger.info(
        "age_calculated",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
        },
    )


if __name__ == "__main__":
    run()
