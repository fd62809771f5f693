"""Load and save user settings as a TOML file."""

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

import tomli_w

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".checklists.toml"
CONFIG_ENV_VAR = "CHECKLISTS_CONFIG"


@dataclass
class Settings:
    data_dir: str = str(Path.home() / "Documents" / "Checklists")
    log_level: str = "INFO"
    write_workers: int = 2
    last_list: str = ""
    # Set when the file on disk could not be parsed; never written.
    keep_file: bool = field(default=False, compare=False, repr=False,
                            metadata={"persist": False})

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()


def _persisted_fields():
    return [f for f in fields(Settings) if f.metadata.get("persist", True)]


def config_path() -> Path:
    env = os.environ.get(CONFIG_ENV_VAR)
    return Path(env).expanduser() if env else DEFAULT_PATH


def load_settings(path: Path | None = None) -> Settings:
    """Read settings; a missing file is created with the defaults.

    A file that cannot be parsed is left alone: the defaults are used for
    this run and ``keep_file`` is set so save_on_exit skips it.
    """
    path = path or config_path()
    if not path.exists():
        settings = Settings()
        try:
            save_settings(settings, path)
        except OSError as exc:
            logger.warning("Could not write default settings to %s: %s", path, exc)
        return settings
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings(keep_file=True)

    settings = Settings()
    for f in _persisted_fields():
        if f.name not in raw:
            continue
        value = raw[f.name]
        default = getattr(settings, f.name)
        if type(value) is not type(default):
            logger.warning("Ignoring setting %s=%r: expected %s",
                           f.name, value, type(default).__name__)
            continue
        setattr(settings, f.name, value)
    if settings.write_workers < 1:
        logger.warning("write_workers must be at least 1, using 1")
        settings.write_workers = 1
    return settings


def save_settings(settings: Settings, path: Path | None = None) -> None:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    raw = {f.name: getattr(settings, f.name) for f in _persisted_fields()}
    with path.open("wb") as f:
        tomli_w.dump(raw, f)


def save_on_exit(settings: Settings, path: Path | None = None) -> bool:
    """Write settings back at shutdown unless the file on disk was unreadable."""
    path = path or config_path()
    if settings.keep_file:
        logger.info("Not overwriting unreadable settings file %s", path)
        return False
    try:
        save_settings(settings, path)
    except OSError as exc:
        logger.warning("Could not save settings to %s: %s", path, exc)
        return False
    return True
