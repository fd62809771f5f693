"""Actions, persistence effects and the pure state transition function."""

import logging
from dataclasses import dataclass, replace

from data import AppState, TodoList

logger = logging.getLogger(__name__)


# ── Actions ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateList:
    name: str


@dataclass(frozen=True)
class DeleteList:
    index: int


@dataclass(frozen=True)
class AddItem:
    list_index: int
    text: str


@dataclass(frozen=True)
class ToggleItem:
    list_index: int
    item_index: int


@dataclass(frozen=True)
class SelectList:
    index: int | None


# ── Effects ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SaveList:
    """Overwrite the record for ``name`` with the complete item sequence."""
    name: str
    items: tuple

    def apply(self, repository) -> None:
        repository.save(self.name, self.items)


@dataclass(frozen=True)
class RemoveList:
    name: str

    def apply(self, repository) -> None:
        repository.remove(self.name)


# ── Reducer ───────────────────────────────────────────────────────────────────

def reduce(state: AppState, action):
    """Return ``(new_state, effect)``.

    A rejected action returns the same state object and no effect.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action: {action!r}")
    return handler(state, action)


def _valid_list_index(state: AppState, index) -> bool:
    return isinstance(index, int) and 0 <= index < len(state.collection)


def _create_list(state: AppState, action: CreateList):
    name = action.name.strip()
    if not name:
        logger.debug("Ignoring blank list name")
        return state, None
    if state.collection.has_name(name):
        logger.debug("Ignoring duplicate list name %r", name)
        return state, None
    collection = state.collection.appended(TodoList(name=name))
    new_state = AppState(collection=collection, selected=len(collection) - 1)
    return new_state, SaveList(name, ())


def _delete_list(state: AppState, action: DeleteList):
    index = action.index
    if not _valid_list_index(state, index):
        logger.debug("Ignoring delete of list %r", index)
        return state, None
    name = state.collection.get_list(index).name
    selected = state.selected
    if selected == index:
        selected = None
    elif selected is not None and selected > index:
        selected -= 1
    new_state = AppState(collection=state.collection.removed(index), selected=selected)
    return new_state, RemoveList(name)


def _add_item(state: AppState, action: AddItem):
    text = action.text.strip()
    if not text or not _valid_list_index(state, action.list_index):
        logger.debug("Ignoring item %r for list %r", action.text, action.list_index)
        return state, None
    lst = state.collection.get_list(action.list_index).with_item(text)
    new_state = replace(state, collection=state.collection.replaced(action.list_index, lst))
    return new_state, SaveList(lst.name, lst.items)


def _toggle_item(state: AppState, action: ToggleItem):
    if not _valid_list_index(state, action.list_index):
        logger.debug("Ignoring toggle in list %r", action.list_index)
        return state, None
    lst = state.collection.get_list(action.list_index)
    if not isinstance(action.item_index, int) or not 0 <= action.item_index < len(lst.items):
        logger.debug("Ignoring toggle of item %r in %r", action.item_index, lst.name)
        return state, None
    lst = lst.with_toggled(action.item_index)
    new_state = replace(state, collection=state.collection.replaced(action.list_index, lst))
    return new_state, SaveList(lst.name, lst.items)


def _select_list(state: AppState, action: SelectList):
    if action.index is not None and not _valid_list_index(state, action.index):
        return state, None
    if action.index == state.selected:
        return state, None
    return replace(state, selected=action.index), None


_HANDLERS = {
    CreateList: _create_list,
    DeleteList: _delete_list,
    AddItem: _add_item,
    ToggleItem: _toggle_item,
    SelectList: _select_list,
}
