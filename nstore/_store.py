from __future__ import annotations

import logging

from typing import Any, Callable, Generic, Optional, TypeVar

from ._reducer import NotesReducer, Reducer
from .actions import Action, validate_action
from .models import State


__all__ = (
    "Dispatch",
    "Middleware",
    "MiddlewareApi",
    "StateFactory",
    "Store",
    "Subscriber",
    "Unsubscribe",

    "create_store",
)


logger = logging.getLogger(__name__)


A = TypeVar("A")
S = TypeVar("S")


Dispatch = Callable[[Any], Any]
Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]
StateFactory = Callable[[], S]


class Store(Generic[S, A]):
    def dispatch(self, action: Any) -> Any:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        raise NotImplementedError


class MiddlewareApi(Generic[S]):
    """Read-only view of a store handed to middleware."""

    def __init__(self, get_state: Callable[[], S]) -> None:
        self._get_state = get_state

    def get_state(self) -> S:
        return self._get_state()


Middleware = Callable[[MiddlewareApi[Any]], Callable[[Dispatch], Dispatch]]


def _subscriber_name(subscriber: Subscriber) -> str:
    return getattr(subscriber, "__qualname__", None) or repr(subscriber)


class _DefaultStore(Store[S, Action]):
    _reducer: Reducer[S, Action]
    _state: S
    _subscribers: list[Subscriber]

    def __init__(
        self,
        reducer: Reducer[S, Action],
        initial_state_factory: StateFactory[S]
    ) -> None:
        self._reducer = reducer
        self._state = initial_state_factory()
        self._subscribers = []

    def _notify(self) -> None:
        # Subscribers added or removed by a handler take effect next dispatch.
        for subscriber in list(self._subscribers):
            subscriber()

    def dispatch(self, action: Any) -> S:
        validated = validate_action(action)

        logger.debug("Dispatching %r", validated)

        self._state = self._reducer(self._state, validated)
        self._notify()

        return self._state

    def get_state(self) -> S:
        return self._state

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        self._subscribers.append(subscriber)

        logger.debug(
            "Subscribed %s (%d subscribers)",
            _subscriber_name(subscriber),
            len(self._subscribers)
        )

        def unsubscribe() -> None:
            for index, candidate in enumerate(self._subscribers):
                if candidate is subscriber:
                    del self._subscribers[index]

                    logger.debug(
                        "Unsubscribed %s (%d subscribers)",
                        _subscriber_name(subscriber),
                        len(self._subscribers)
                    )

                    return

        return unsubscribe


def create_store(
    middleware: Optional[Middleware] = None,
    *,
    reducer: Optional[Reducer[Any, Action]] = None,
    initial_state_factory: Optional[StateFactory[Any]] = None
) -> Store[Any, Action]:
    """Create an isolated store holding notes state."""
    store: _DefaultStore[Any] = _DefaultStore(
        reducer or NotesReducer(),
        initial_state_factory or State.initial
    )

    if middleware is None:
        return store

    api = MiddlewareApi(store.get_state)
    enhanced_dispatch = middleware(api)(store.dispatch)

    setattr(store, "dispatch", enhanced_dispatch)

    return store
