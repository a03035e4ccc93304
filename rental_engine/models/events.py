"""Synchronous change notification used by the registry and the ledger."""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ChangeNotifier:
    """
    Keeps an ordered list of zero-argument listeners and calls them after a
    mutation. A listener that raises is logged and skipped; the remaining
    listeners still run and the mutation that triggered the call stands.

    Not reentrant: a listener must not mutate the component that notified it.
    """

    def __init__(self, name: str = "changes"):
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener` once; return a handle that unsubscribes it."""
        if listener is not None and listener not in self._listeners:
            self._listeners.append(listener)

        def _unsubscribe():
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: Listener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def notify(self) -> None:
        # iterate over a copy so a listener may unsubscribe itself
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("[%s] listener %r failed; continuing", self.name, listener)

    def __len__(self) -> int:
        return len(self._listeners)
