"""Owns the current app state and routes persistence effects to the writer."""

import logging
from functools import partial

from data import AppState
from reducer import AddItem, CreateList, DeleteList, SelectList, ToggleItem, reduce
from storage import ListRepository
from write_queue import WriteQueue

logger = logging.getLogger(__name__)


class ListsController:
    """Entry point for every user intent.

    Each operation computes the next state synchronously, then hands at most
    one effect to the write queue. Operations return True when the state
    changed.
    """

    def __init__(self, repository: ListRepository, write_queue: WriteQueue):
        self._repository = repository
        self._write_queue = write_queue
        self._state = AppState()

    @property
    def state(self) -> AppState:
        return self._state

    def load(self) -> AppState:
        self._state = AppState(collection=self._repository.load_all())
        return self._state

    def dispatch(self, action) -> bool:
        new_state, effect = reduce(self._state, action)
        changed = new_state is not self._state
        self._state = new_state
        if effect is not None:
            # Names equal under casefold share a file on case-insensitive
            # file systems, so they share one writer slot too.
            self._write_queue.submit(effect.name.casefold(),
                                     partial(effect.apply, self._repository))
        return changed

    # ------------------------------------------------------------------ #
    # Operations                                                           #
    # ------------------------------------------------------------------ #

    def create_list(self, name: str) -> bool:
        return self.dispatch(CreateList(name))

    def delete_list(self, index: int) -> bool:
        return self.dispatch(DeleteList(index))

    def add_item(self, list_index: int, text: str) -> bool:
        return self.dispatch(AddItem(list_index, text))

    def toggle_item(self, list_index: int, item_index: int) -> bool:
        return self.dispatch(ToggleItem(list_index, item_index))

    def select_list(self, index: int | None) -> bool:
        return self.dispatch(SelectList(index))

    def select_by_name(self, name: str) -> bool:
        index = self._state.collection.index_of(name)
        if index is None:
            return False
        return self.select_list(index)

    def flush(self, timeout: float | None = None) -> bool:
        return self._write_queue.wait_idle(timeout)

    def close(self) -> None:
        logger.info("Waiting for pending writes")
        self._write_queue.close()
