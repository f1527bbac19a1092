from typing import Generic, TypeVar

from .actions import Action, CreateNote, DeleteNote, UpdateNote
from .models import Note, State


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "NotesReducer",
    "Reducer",

    "reduce_notes",
)


class Reducer(Generic[S, A]):
    def apply(self, state: S, action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)


def _create(state: State, action: CreateNote) -> State:
    id = state.next_note_id

    return state.model_copy(
        update={
            "next_note_id": id + 1,
            "notes": {
                **state.notes,
                id: Note(id=id, content=action.content)
            }
        }
    )


def _update(state: State, action: UpdateNote) -> State:
    existing = state.notes.get(action.id)

    # Updates are not guarded by existence: an unknown id gets a new note.
    if existing is None:
        edited = Note(id=action.id, content=action.content)
    else:
        edited = existing.model_copy(update={"content": action.content})

    return state.model_copy(
        update={
            "notes": {
                **state.notes,
                action.id: edited
            }
        }
    )


def _delete(state: State, action: DeleteNote) -> State:
    notes = {
        id: note
        for id, note in state.notes.items()
        if id != action.id
    }

    return state.model_copy(update={"notes": notes})


class NotesReducer(Reducer[State, Action]):
    def apply(self, state: State, action: Action) -> State:
        if isinstance(action, CreateNote):
            return _create(state, action)

        if isinstance(action, UpdateNote):
            return _update(state, action)

        if isinstance(action, DeleteNote):
            return _delete(state, action)

        return state


_notes_reducer = NotesReducer()


def reduce_notes(state: State, action: Action) -> State:
    return _notes_reducer.apply(state, action)
