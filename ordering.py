"""Display ordering: unchecked items first, checked items last."""

from typing import Iterable

from data import Item


def display_order(items: Iterable[Item]) -> list[tuple[int, Item]]:
    """Stable partition of items into unchecked then checked.

    Each entry carries the item's storage index so that an action taken on a
    displayed row maps back to the right position in the stored sequence.
    """
    indexed = list(enumerate(items))
    unchecked = [(i, item) for i, item in indexed if not item.checked]
    checked = [(i, item) for i, item in indexed if item.checked]
    return unchecked + checked
