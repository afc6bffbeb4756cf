import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp, monkeypatch):
    """Main window with the modal box replaced by a recorder."""
    import ui_main_window

    shown = []

    def fake_information(parent, title, text, *args, **kwargs):
        shown.append((title, text))
        return None

    monkeypatch.setattr(ui_main_window.QMessageBox, "information", fake_information)

    win = ui_main_window.MainWindow(theme_name="dark")
    win.shown_messages = shown
    yield win
    win.close()
    win.deleteLater()
