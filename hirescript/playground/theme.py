"""ThemeSignal - The site's color-mode preference, observable by editors."""

import logging
from typing import Callable

from hirescript.schemas import ThemePreference, editor_theme_for

from .signal import Signal


logger = logging.getLogger(__name__)


class ThemeSignal:
    """Color-mode preference ("dark", "light" or "system")."""

    def __init__(self, preference: ThemePreference | str = ThemePreference.SYSTEM):
        self._cell: Signal[ThemePreference] = Signal(self._parse(preference))

    @staticmethod
    def _parse(preference: ThemePreference | str) -> ThemePreference:
        try:
            return ThemePreference(preference)
        except ValueError:
            logger.warning(f"Unknown theme preference {preference!r}, using system")
            return ThemePreference.SYSTEM

    @property
    def preference(self) -> ThemePreference:
        return self._cell.value

    @property
    def editor_theme(self) -> str:
        return editor_theme_for(self._cell.value)

    def set(self, preference: ThemePreference | str) -> None:
        parsed = self._parse(preference)
        if parsed == self._cell.value:
            return
        self._cell.set(parsed)

    def subscribe(self, callback: Callable[[ThemePreference], None]) -> Callable[[], None]:
        return self._cell.subscribe(callback)

    @property
    def subscriber_count(self) -> int:
        return self._cell.subscriber_count
