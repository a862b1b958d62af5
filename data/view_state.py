"""Display preferences: grid/list layout and light/dark color scheme.

Both values live in the settings store under fixed keys and are written back
on every toggle. Missing or unrecognised stored values fall back to defaults.
"""

import logging

logger = logging.getLogger(__name__)

VIEW_MODE_KEY = "view_mode"
THEME_MODE_KEY = "theme_mode"

PRESENTATION_MODES = ("grid", "list")
COLOR_SCHEMES = ("light", "dark")

DEFAULT_PRESENTATION_MODE = "grid"
DEFAULT_COLOR_SCHEME = "dark"


def _read_choice(store, key: str, choices: tuple[str, ...], default: str) -> str:
    value = store.get_setting(key, "")
    if value in choices:
        return value
    if value:
        logger.warning("Ignoring unrecognised %s value %r, using %r", key, value, default)
    return default


class ViewState:
    """Presentation mode and color scheme, persisted via a get/set settings store."""

    def __init__(self, store):
        self._store = store
        self.presentation_mode = _read_choice(
            store, VIEW_MODE_KEY, PRESENTATION_MODES, DEFAULT_PRESENTATION_MODE)
        self.color_scheme = _read_choice(
            store, THEME_MODE_KEY, COLOR_SCHEMES, DEFAULT_COLOR_SCHEME)

    def toggle_presentation(self) -> str:
        self.presentation_mode = "list" if self.presentation_mode == "grid" else "grid"
        self._store.set_setting(VIEW_MODE_KEY, self.presentation_mode)
        logger.debug("Presentation mode -> %s", self.presentation_mode)
        return self.presentation_mode

    def toggle_color_scheme(self) -> str:
        self.color_scheme = "light" if self.color_scheme == "dark" else "dark"
        self._store.set_setting(THEME_MODE_KEY, self.color_scheme)
        logger.debug("Color scheme -> %s", self.color_scheme)
        return self.color_scheme

    def to_dict(self) -> dict:
        return {"view_mode": self.presentation_mode, "theme_mode": self.color_scheme}
