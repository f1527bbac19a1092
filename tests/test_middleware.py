"""Tests store middleware."""
from __future__ import annotations

import logging
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from nstore import (
    CREATE_NOTE,
    UPDATE_NOTE,
    Dispatch,
    InvalidAction,
    MiddlewareApi,
    Note,
    chain_middleware,
    create_store,
    logging_middleware,
)


def _recording(
    name: str,
    calls: list[str]
) -> Callable[[MiddlewareApi[Any]], Callable[[Dispatch], Dispatch]]:
    def middleware(api: MiddlewareApi[Any]) -> Callable[[Dispatch], Dispatch]:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                calls.append(name)
                return next_dispatch(action)

            return dispatch

        return wrap

    return middleware


def test_middleware_replaces_dispatch() -> None:
    inner_dispatch = MagicMock()
    reducer = MagicMock()
    subject = create_store(lambda api: lambda dispatch: inner_dispatch, reducer=reducer)
    state = subject.get_state()

    subject.dispatch({"type": CREATE_NOTE})
    subject.dispatch({"type": UPDATE_NOTE, "id": 0, "content": "Update"})

    assert inner_dispatch.call_count == 2
    reducer.assert_not_called()
    assert subject.get_state() is state


def test_middleware_receives_read_only_api() -> None:
    received = []

    def middleware(api: MiddlewareApi[Any]) -> Callable[[Dispatch], Dispatch]:
        received.append(api)
        return lambda dispatch: dispatch

    subject = create_store(middleware)

    assert len(received) == 1
    assert received[0].get_state() is subject.get_state()
    assert not hasattr(received[0], "dispatch")
    assert not hasattr(received[0], "subscribe")


def test_middleware_forwards_to_base_dispatch() -> None:
    observed = []

    def middleware(api: MiddlewareApi[Any]) -> Callable[[Dispatch], Dispatch]:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                before = api.get_state()
                result = next_dispatch(action)
                observed.append((before.next_note_id, api.get_state().next_note_id))
                return result

            return dispatch

        return wrap

    subject = create_store(middleware)
    handler = MagicMock()
    subject.subscribe(handler)

    subject.dispatch({"type": CREATE_NOTE, "content": "through"})

    assert observed == [(0, 1)]
    assert subject.get_state().notes == {0: Note(id=0, content="through")}
    handler.assert_called_once_with()


def test_middleware_can_rewrite_actions() -> None:
    def middleware(api: MiddlewareApi[Any]) -> Callable[[Dispatch], Dispatch]:
        return lambda next_dispatch: lambda action: next_dispatch(
            {**action, "content": action["content"].upper()}
        )

    subject = create_store(middleware)

    subject.dispatch({"type": CREATE_NOTE, "content": "shout"})

    assert subject.get_state().notes[0].content == "SHOUT"


def test_base_dispatch_still_validates() -> None:
    subject = create_store(lambda api: lambda dispatch: dispatch)

    with pytest.raises(InvalidAction, match="Action must have a type"):
        subject.dispatch({})


def test_middleware_stores_are_isolated() -> None:
    inner_dispatch = MagicMock()
    wrapped = create_store(lambda api: lambda dispatch: inner_dispatch)
    plain = create_store()

    plain.dispatch({"type": CREATE_NOTE})

    inner_dispatch.assert_not_called()
    assert wrapped.get_state().notes == {}


def test_chain_middleware_order() -> None:
    calls: list[str] = []
    subject = create_store(
        chain_middleware(_recording("outer", calls), _recording("inner", calls))
    )

    subject.dispatch({"type": CREATE_NOTE})

    assert calls == ["outer", "inner"]
    assert subject.get_state().next_note_id == 1


def test_chain_middleware_empty() -> None:
    subject = create_store(chain_middleware())

    subject.dispatch({"type": CREATE_NOTE})

    assert subject.get_state().next_note_id == 1


def test_logging_middleware(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="nstore")
    subject = create_store(logging_middleware)

    result = subject.dispatch({"type": CREATE_NOTE, "content": "logged"})

    assert result is subject.get_state()
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "nstore._middleware"
    ]
    assert len(messages) == 2
    assert messages[0].startswith("Action: ")
    assert "logged" in messages[0]
    assert messages[1].startswith("State: ")
