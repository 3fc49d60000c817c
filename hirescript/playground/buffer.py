"""
CodeBuffer - The single in-flight code string shared across pages.

A single-slot mailbox: lesson pages write example code into it, the
playground editor reads it when it mounts. No history, last write wins.
"""

import logging
from typing import Callable, Optional

from .routing import PLAYGROUND_PATH, Router
from .signal import Signal


logger = logging.getLogger(__name__)


class CodeBuffer:
    """
    Shared code buffer with an optional jump to the playground.

    The text is stored before the route push, so an editor mounted as a
    result of the navigation always sees the value just written.
    """

    def __init__(
        self,
        router: Optional[Router] = None,
        playground_path: str = PLAYGROUND_PATH,
        text: str = "",
    ):
        self.router = router
        self.playground_path = playground_path
        self._cell: Signal[str] = Signal(text)

    def get(self) -> str:
        """Current text (empty string initially)."""
        return self._cell.value

    def set(self, text: str, navigate: bool = False) -> None:
        """
        Store text, optionally navigating to the playground.

        Args:
            text: New buffer contents
            navigate: Push the playground route after storing
        """
        self._cell.set(text)
        if not navigate:
            return
        if self.router is None:
            logger.warning("Buffer has no router, cannot navigate to the playground")
            return
        self.router.push(self.playground_path)

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Observe writes; returns an unsubscribe function."""
        return self._cell.subscribe(callback)
