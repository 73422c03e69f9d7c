"""Dark/light theme preference persisted in browser-scoped storage.

The stored value is the string "dark" or "light" under a single key. With
no stored value the page follows the system color-scheme preference.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
DARK = "dark"
LIGHT = "light"


class ThemeStore:
    """Reads and writes the theme flag in a key-value storage.

    Args:
        storage: Any mutable mapping, e.g. NiceGUI's ``app.storage.user``.
    """

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self._storage = storage

    def load(self) -> bool | None:
        """Return True for dark, False for light, None when nothing is stored."""
        value = self._storage.get(THEME_KEY)
        if value == DARK:
            return True
        if value == LIGHT:
            return False
        if value is not None:
            logger.warning(f"Ignoring unknown stored theme: {value!r}")
        return None

    def save(self, dark: bool) -> None:
        self._storage[THEME_KEY] = DARK if dark else LIGHT

    def toggle(self, current: bool) -> bool:
        """Flip the effective theme, persist it and return the new value."""
        dark = not current
        self.save(dark)
        return dark
