"""Entry point for the Checklists desktop app."""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

import config
from controller import ListsController
from filestore import FileStore
from storage import ListRepository
from window import MainWindow
from write_queue import WriteQueue


def _parse_args(argv):
    ap = argparse.ArgumentParser(description="Named checklists, one JSON file per list.")
    ap.add_argument("--config", type=Path, default=None,
                    help="settings file (default: ~/.checklists.toml)")
    ap.add_argument("--data-dir", type=Path, default=None,
                    help="directory holding the list records")
    return ap.parse_known_args(argv)


def build_controller(settings: config.Settings, data_dir: Path | None = None) -> ListsController:
    store = FileStore(data_dir or settings.data_path)
    controller = ListsController(ListRepository(store), WriteQueue(settings.write_workers))
    controller.load()
    if settings.last_list:
        controller.select_by_name(settings.last_list)
    return controller


def main():
    args, qt_args = _parse_args(sys.argv[1:])
    config_path = args.config or config.config_path()
    settings = config.load_settings(config_path)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    controller = build_controller(settings, args.data_dir)

    def _on_close():
        controller.close()
        config.save_on_exit(settings, config_path)

    app = QApplication(sys.argv[:1] + qt_args)
    app.setApplicationName("Checklists")
    app.setStyle("Fusion")

    window = MainWindow(controller, settings, on_close=_on_close)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
