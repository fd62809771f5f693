"""In-memory data model for the checklists app.

All values are immutable; transitions build new instances.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Item:
    text: str
    checked: bool = False

    def toggled(self) -> "Item":
        return replace(self, checked=not self.checked)

    def to_record(self) -> dict:
        return {"text": self.text, "checked": self.checked}


@dataclass(frozen=True)
class TodoList:
    name: str
    items: tuple[Item, ...] = ()

    def with_item(self, text: str) -> "TodoList":
        return replace(self, items=self.items + (Item(text),))

    def with_toggled(self, item_index: int) -> "TodoList":
        items = tuple(
            item.toggled() if i == item_index else item
            for i, item in enumerate(self.items)
        )
        return replace(self, items=items)


@dataclass(frozen=True)
class ListCollection:
    lists: tuple[TodoList, ...] = ()

    def __len__(self) -> int:
        return len(self.lists)

    def __iter__(self):
        return iter(self.lists)

    def list_names(self) -> list[str]:
        return [lst.name for lst in self.lists]

    def get_list(self, index: int) -> TodoList:
        return self.lists[index]

    def index_of(self, name: str) -> int | None:
        for i, lst in enumerate(self.lists):
            if lst.name == name:
                return i
        return None

    def has_name(self, name: str) -> bool:
        """Case-insensitive, since keys that differ only by case collide on
        case-insensitive file systems."""
        folded = name.casefold()
        return any(lst.name.casefold() == folded for lst in self.lists)

    def appended(self, lst: TodoList) -> "ListCollection":
        return ListCollection(self.lists + (lst,))

    def replaced(self, index: int, lst: TodoList) -> "ListCollection":
        return ListCollection(self.lists[:index] + (lst,) + self.lists[index + 1:])

    def removed(self, index: int) -> "ListCollection":
        return ListCollection(self.lists[:index] + self.lists[index + 1:])


@dataclass(frozen=True)
class AppState:
    collection: ListCollection = field(default_factory=ListCollection)
    selected: int | None = None

    def selected_list(self) -> TodoList | None:
        if self.selected is None:
            return None
        return self.collection.get_list(self.selected)
