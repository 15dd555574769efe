"""A multicast callback list keyed by the object that registered each callback."""

from __future__ import annotations

from typing import Any, Callable


class Delegate:
    """Callbacks that are called in registration order on ``broadcast``."""

    def __init__(self) -> None:
        self._listeners: list[tuple[Any, Callable[..., Any]]] = []

    def bind(self, owner: Any, callback: Callable[..., Any]) -> None:
        """Register ``callback`` on behalf of ``owner``."""
        self._listeners.append((owner, callback))

    def remove(self, owner: Any) -> None:
        """Drop every callback registered by ``owner``."""
        self._listeners = [
            (listener_owner, callback)
            for listener_owner, callback in self._listeners
            if listener_owner is not owner
        ]

    def broadcast(self, *args: Any) -> None:
        for _owner, callback in tuple(self._listeners):
            callback(*args)

    def clear(self) -> None:
        self._listeners.clear()

    def is_bound(self) -> bool:
        return bool(self._listeners)