# main.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from staff_directory import config
from staff_directory.data.data_manager import JsonSlot
from staff_directory.gui.main_window import MainWindow
from staff_directory.logic.record_store import RecordStore


def main() -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    store = RecordStore(JsonSlot(config.EMP_FILE), choices=config.DEFAULT_CHOICES)
    win = MainWindow(store, config.DEFAULT_CHOICES)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
