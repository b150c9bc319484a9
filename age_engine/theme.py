"""Theme preference: explicit application state backed by a key-value file.

The state is read once at startup and written back on every change. Nothing
in the calculation modules reads it.
"""

import json
import logging
from enum import Enum
from pathlib import Path

logger: logging.Logger = logging.getLogger(__name__)

THEME_KEY: str = "theme"


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class PreferenceStore:
    """String key-value pairs persisted as a flat JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.warning("Ignoring unreadable preferences file %s: not UTF-8", self.path)
            return {}
        except OSError as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable preferences file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("Preference %s written to %s", key, self.path)


class ThemeState:
    """The active theme, persisted through a :class:`PreferenceStore`."""

    def __init__(self, store: PreferenceStore, theme: Theme = Theme.LIGHT) -> None:
        self._store = store
        self._theme = theme

    @classmethod
    def load(cls, store: PreferenceStore, prefers_dark: bool = False) -> "ThemeState":
        """Restore the saved theme, falling back to the host preference.

        A saved ``dark`` wins; with nothing saved, *prefers_dark* decides.
        Any other saved value means light.
        """
        saved = store.get(THEME_KEY)
        if saved == Theme.DARK.value or (saved is None and prefers_dark):
            theme = Theme.DARK
        else:
            theme = Theme.LIGHT
        logger.debug("Theme loaded: %s", theme.value)
        return cls(store, theme)

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme is Theme.DARK

    def set_theme(self, theme: Theme) -> None:
        self._theme = Theme(theme)
        self._store.set(THEME_KEY, self._theme.value)

    def toggle(self) -> Theme:
        self.set_theme(Theme.LIGHT if self.is_dark else Theme.DARK)
        return self._theme
