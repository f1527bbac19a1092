import logging

from ._errors import InvalidAction, StoreError
from ._middleware import chain_middleware, logging_middleware
from ._reducer import NotesReducer, Reducer, reduce_notes
from ._store import (
    Dispatch,
    Middleware,
    MiddlewareApi,
    StateFactory,
    Store,
    Subscriber,
    Unsubscribe,
    create_store
)
from .actions import (
    CREATE_NOTE,
    DELETE_NOTE,
    UPDATE_NOTE,
    Action,
    CreateNote,
    DeleteNote,
    UnknownAction,
    UpdateNote,
    validate_action
)
from .models import Note, State


__all__ = (
    "CREATE_NOTE",
    "DELETE_NOTE",
    "UPDATE_NOTE",

    "Action",
    "CreateNote",
    "DeleteNote",
    "Dispatch",
    "InvalidAction",
    "Middleware",
    "MiddlewareApi",
    "Note",
    "NotesReducer",
    "Reducer",
    "State",
    "StateFactory",
    "Store",
    "StoreError",
    "Subscriber",
    "UnknownAction",
    "Unsubscribe",
    "UpdateNote",

    "chain_middleware",
    "create_store",
    "logging_middleware",
    "reduce_notes",
    "validate_action"
)


logging.getLogger(__name__).addHandler(logging.NullHandler())
