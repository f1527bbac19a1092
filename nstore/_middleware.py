from __future__ import annotations

import logging

from typing import Any, Callable

from ._store import Dispatch, Middleware, MiddlewareApi


__all__ = (
    "chain_middleware",
    "logging_middleware",
)


logger = logging.getLogger(__name__)


def chain_middleware(*middleware: Middleware) -> Middleware:
    """Compose middlewares into one; the first given is outermost."""
    def apply(api: MiddlewareApi[Any]) -> Callable[[Dispatch], Dispatch]:
        def wrap(dispatch: Dispatch) -> Dispatch:
            enhanced_dispatch = dispatch

            for callable in reversed(middleware):
                enhanced_dispatch = callable(api)(enhanced_dispatch)

            return enhanced_dispatch

        return wrap

    return apply


def logging_middleware(
    api: MiddlewareApi[Any]
) -> Callable[[Dispatch], Dispatch]:
    def wrap(next_dispatch: Dispatch) -> Dispatch:
        def dispatch(action: Any) -> Any:
            logger.debug("Action: %r", action)

            result = next_dispatch(action)

            logger.debug("State: %r", api.get_state())

            return result

        return dispatch

    return wrap
