"""Key-scoped text storage over a single local directory."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_TMP_SUFFIX = ".tmp"


class FileStore:
    """Reads and writes UTF-8 text files named by bare keys inside ``root``.

    - write: overwrite via a temp file and an atomic rename
    - read: raises FileNotFoundError for a missing key
    - delete: a missing key is not an error
    - list_keys: regular files only, in directory enumeration order
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def write(self, key: str, text: str) -> None:
        path = self._path(key)
        self.root.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + _TMP_SUFFIX)
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            tmp_path.replace(path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def read(self, key: str) -> str:
        return self._path(key).read_text(encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def list_keys(self) -> list[str]:
        if not self.root.exists():
            logger.info("Storage directory %s does not exist yet", self.root)
            return []
        with os.scandir(self.root) as entries:
            return [
                entry.name for entry in entries
                if entry.is_file() and not entry.name.endswith(_TMP_SUFFIX)
            ]

    def _path(self, key: str) -> Path:
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid storage key: {key!r}")
        if "/" in key or "\\" in key or os.sep in key or key in (".", ".."):
            raise ValueError(f"Storage key must be a bare file name: {key!r}")
        return self.root / key
