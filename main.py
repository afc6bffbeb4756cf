import logging
import sys

from PyQt5.QtWidgets import QApplication

from settings import LOG_FORMAT, LOG_LEVEL
from ui_main_window import MainWindow


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
