"""Load and save lists as one JSON record per list."""

import json
import logging
from urllib.parse import quote, unquote

from data import Item, ListCollection, TodoList
from filestore import FileStore

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"

# Characters that are unsafe in file names on at least one common platform.
# "%" is the escape character itself.
_UNSAFE_CHARS = frozenset('%<>:"/\\|?*')


def record_key(name: str) -> str:
    """Storage key for a list name, e.g. ``Groceries`` -> ``Groceries.json``."""
    escaped = "".join(
        quote(ch, safe="") if ch in _UNSAFE_CHARS or ord(ch) < 32 or ord(ch) == 127 else ch
        for ch in name
    )
    return escaped + RECORD_SUFFIX


def list_name_for_key(key: str) -> str | None:
    """Inverse of record_key; None for keys that are not list records."""
    if not key.endswith(RECORD_SUFFIX):
        return None
    name = unquote(key[:-len(RECORD_SUFFIX)])
    return name or None


def parse_record(text: str) -> tuple[Item, ...]:
    """Parse a record; raises ValueError when its structure is wrong."""
    try:
        raw = json.loads(text)
    except RecursionError:
        raise ValueError("record is nested too deeply") from None
    if not isinstance(raw, list):
        raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
    items = []
    for entry in raw:
        if not isinstance(entry, dict) or not isinstance(entry.get("text"), str):
            raise ValueError(f"malformed item: {entry!r}")
        checked = entry.get("checked", False)
        if not isinstance(checked, bool):
            raise ValueError(f"malformed checked flag: {checked!r}")
        items.append(Item(text=entry["text"], checked=checked))
    return tuple(items)


def dump_record(items) -> str:
    return json.dumps([item.to_record() for item in items], ensure_ascii=False)


class ListRepository:
    """Sole writer of persisted lists.

    Remembers which key every known list lives under, so a record whose file
    name does not round-trip through the key codec is still overwritten in
    place instead of being duplicated.
    """

    def __init__(self, store: FileStore):
        self._store = store
        self._keys: dict[str, str] = {}

    def key_for(self, name: str) -> str:
        return self._keys.get(name) or record_key(name)

    def load_all(self) -> ListCollection:
        try:
            keys = self._store.list_keys()
        except OSError:
            logger.exception("Could not enumerate lists in %s", self._store.root)
            return ListCollection()

        self._keys.clear()
        lists = []
        for key in keys:
            name = list_name_for_key(key)
            if name is None:
                continue
            if name in self._keys:
                logger.warning(
                    "Skipping %s: list %r is already loaded from %s",
                    key, name, self._keys[name],
                )
                continue
            self._keys[name] = key
            lists.append(TodoList(name=name, items=self._read_items(key)))

        logger.info("Loaded %d list(s) from %s", len(lists), self._store.root)
        return ListCollection(tuple(lists))

    def save(self, name: str, items) -> bool:
        """Overwrite the full record for ``name``. Returns False on failure."""
        key = self._keys.setdefault(name, record_key(name))
        try:
            self._store.write(key, dump_record(items))
        except (OSError, ValueError):
            logger.exception("Error saving list %r to %s", name, key)
            return False
        logger.debug("List %r saved (%d item(s))", name, len(items))
        return True

    def remove(self, name: str) -> bool:
        """Delete the record for ``name``; a missing record counts as success."""
        key = self.key_for(name)
        try:
            self._store.delete(key)
        except OSError:
            logger.exception("Error deleting list %r at %s", name, key)
            return False
        self._keys.pop(name, None)
        logger.debug("List %r deleted", name)
        return True

    def _read_items(self, key: str) -> tuple[Item, ...]:
        try:
            return parse_record(self._store.read(key))
        except (OSError, ValueError) as exc:
            # Treated as a list with no items; the record stays on disk until
            # the next save overwrites it.
            logger.warning("Error loading %s, starting it empty: %s", key, exc)
            return ()
