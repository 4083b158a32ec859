"""Synchronous publish/subscribe primitive.

:class:`Event` keeps an ordered set of listener subscriptions and calls
them inline, in subscription order, whenever :meth:`Event.publish` is
invoked.  It carries no knowledge of properties and can back any
observable in the scene graph.

Guarantees
----------
* Delivery is synchronous; ``publish`` returns after the last listener.
* A listener removed during a publish is not called later in that round.
* A listener added during a publish is first called on the next round.
* Listener exceptions propagate to the publisher and stop the round.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from scene_property.exceptions import InvalidListenerError

logger = logging.getLogger(__name__)

_handle_ids = itertools.count(1)


@dataclass(frozen=True, slots=True)
class ListenerHandle:
    """Identifies one subscription returned by :meth:`Event.subscribe`."""

    id: int
    """Process-unique subscription number."""

    listener: Callable[..., Any] = field(compare=False)
    """The subscribed callable."""

    scope: Any = field(default=None, compare=False)
    """Object passed as the first argument to *listener*, if not ``None``."""

    def __call__(self, *args: Any) -> Any:
        if self.scope is None:
            return self.listener(*args)
        return self.listener(self.scope, *args)


class Event:
    """An ordered list of listeners notified synchronously on publish."""

    def __init__(self) -> None:
        self._handles: dict[int, ListenerHandle] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(listeners={len(self._handles)})"

    @property
    def number_of_listeners(self) -> int:
        """Number of currently subscribed listeners."""
        return len(self._handles)

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(
        self, listener: Callable[..., Any], scope: Any = None,
    ) -> ListenerHandle:
        """Subscribe *listener* and return the handle identifying it.

        When *scope* is given, *listener* is called as
        ``listener(scope, *args)``.

        Raises
        ------
        InvalidListenerError
            If *listener* is not callable.
        """
        if not callable(listener):
            raise InvalidListenerError(
                f"Event listener must be callable, got {type(listener).__name__}.",
                hint="Pass a function, bound method or other callable.",
            )
        handle = ListenerHandle(id=next(_handle_ids), listener=listener, scope=scope)
        self._handles[handle.id] = handle
        logger.debug("Subscribed listener #%d to %r", handle.id, self)
        return handle

    def unsubscribe(self, handle: ListenerHandle) -> bool:
        """Remove the subscription identified by *handle*.

        Returns ``False`` if it was not (or no longer) subscribed.
        """
        removed = self._handles.pop(handle.id, None)
        if removed is None:
            return False
        logger.debug("Unsubscribed listener #%d from %r", handle.id, self)
        return True

    def add_listener(
        self, listener: Callable[..., Any], scope: Any = None,
    ) -> Callable[[], bool]:
        """Subscribe *listener* and return a zero-argument remover."""
        handle = self.subscribe(listener, scope)
        return lambda: self.unsubscribe(handle)

    def remove_listener(self, listener: Callable[..., Any], scope: Any = None) -> bool:
        """Remove the earliest subscription of *listener* with *scope*."""
        for handle in self._handles.values():
            if handle.listener == listener and handle.scope is scope:
                return self.unsubscribe(handle)
        return False

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def publish(self, *args: Any) -> None:
        """Call every subscribed listener with *args*, in subscription order."""
        for handle in tuple(self._handles.values()):
            if handle.id in self._handles:
                handle(*args)
