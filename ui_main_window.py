from typing import Dict, Optional, Tuple

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QFrame,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QStackedWidget,
    QMessageBox,
    QGraphicsDropShadowEffect,
)
from PyQt5.QtGui import QPalette, QColor

from data import AGE_MAX_LENGTH, CHOICE_MAX_LENGTH
from form_state import FormController, Screen
from messages import get_message
from settings import THEME_NAME, WINDOW_MIN_SIZE, WINDOW_SIZE
from themes import Theme, apply_theme_to_palette, build_stylesheet, get_theme


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[FormController] = None, theme_name: str = THEME_NAME):
        super().__init__()

        self.controller = controller or FormController()
        self.controller.on_movie_selected = self._show_movie_selected

        self.current_theme: Theme = get_theme(theme_name)
        self.option_labels: Dict[int, QLabel] = {}

        self.setMinimumSize(*WINDOW_MIN_SIZE)
        self.resize(*WINDOW_SIZE)
        self.setWindowTitle(self._t("app_title"))

        self._build_ui()
        self._apply_theme(self.current_theme)
        self._render()

    # ---------- helpers ----------

    def _t(self, key: str, **fields) -> str:
        return get_message(key, **fields)

    @property
    def _catalog_size(self) -> int:
        return len(self.controller.catalog)

    # ---------- UI BUILD ----------

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(20, 20, 20, 20)
        central.setLayout(main_layout)

        self.stack = QStackedWidget()
        self.age_page = self._build_age_page()
        self.movies_page = self._build_movies_page()
        self.stack.addWidget(self.age_page)
        self.stack.addWidget(self.movies_page)

        main_layout.addStretch(1)
        main_layout.addWidget(self.stack)
        main_layout.addStretch(1)

    def _build_card(self) -> Tuple[QFrame, QVBoxLayout]:
        card = QFrame()
        card.setObjectName("card")
        self._apply_card_shadow(card)
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)
        card.setLayout(layout)
        return card, layout

    def _build_age_page(self) -> QFrame:
        card, layout = self._build_card()

        layout.addWidget(self._centered_label(self._t("age_title"), "title"))
        subtitle = self._centered_label(self._t("age_subtitle"), "subtitle")
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        self.age_edit = QLineEdit()
        self.age_edit.setPlaceholderText(self._t("age_placeholder"))
        self.age_edit.setMaxLength(AGE_MAX_LENGTH)
        self.age_edit.textChanged.connect(self.controller.set_age_text)
        self.age_edit.returnPressed.connect(self._on_age_submit)
        layout.addWidget(self.age_edit)

        self.age_error_label = self._centered_label("", "error")
        self.age_error_label.setWordWrap(True)
        layout.addWidget(self.age_error_label)

        self.age_btn = QPushButton(self._t("age_button"))
        self.age_btn.clicked.connect(self._on_age_submit)
        layout.addWidget(self.age_btn)

        return card

    def _build_movies_page(self) -> QFrame:
        card, layout = self._build_card()
        size = self._catalog_size

        layout.addWidget(self._centered_label(self._t("movies_title"), "title"))
        layout.addWidget(
            self._centered_label(self._t("movies_subtitle", size=size), "subtitle")
        )

        options = QVBoxLayout()
        options.setSpacing(2)
        for number, movie in enumerate(self.controller.catalog, start=1):
            lbl = self._centered_label(
                self._t("movie_option", number=number, movie=movie), "option"
            )
            options.addWidget(lbl)
            self.option_labels[number] = lbl
        layout.addLayout(options)

        self.choice_edit = QLineEdit()
        self.choice_edit.setPlaceholderText(self._t("choice_placeholder", size=size))
        self.choice_edit.setMaxLength(CHOICE_MAX_LENGTH)
        self.choice_edit.textChanged.connect(self.controller.set_choice_text)
        self.choice_edit.returnPressed.connect(self._on_choice_submit)
        layout.addWidget(self.choice_edit)

        self.choice_error_label = self._centered_label("", "error")
        self.choice_error_label.setWordWrap(True)
        layout.addWidget(self.choice_error_label)

        self.selection_label = self._centered_label("", "info")
        layout.addWidget(self.selection_label)

        self.choice_btn = QPushButton(self._t("choice_button"))
        self.choice_btn.clicked.connect(self._on_choice_submit)
        layout.addWidget(self.choice_btn)

        self.back_btn = QPushButton(self._t("back_button"))
        self.back_btn.setObjectName("secondaryButton")
        self.back_btn.clicked.connect(self._on_back_to_age)
        layout.addWidget(self.back_btn)

        return card

    # ---------- LABEL HELPERS ----------

    def _centered_label(self, text: str, object_name: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setObjectName(object_name)
        lbl.setAlignment(Qt.AlignCenter)
        return lbl

    def _apply_card_shadow(self, widget: QWidget) -> None:
        effect = QGraphicsDropShadowEffect(self)
        effect.setBlurRadius(24)
        effect.setOffset(0, 10)
        effect.setColor(QColor(15, 23, 42, 110))
        widget.setGraphicsEffect(effect)

    # ---------- THEME ----------

    def _apply_theme(self, theme: Theme) -> None:
        self.current_theme = theme

        palette: QPalette = self.palette()
        apply_theme_to_palette(theme, palette)
        self.setPalette(palette)
        self.setStyleSheet(build_stylesheet(theme))

    # ---------- RENDER ----------

    def _render(self) -> None:
        """Push controller state into the widgets."""
        state = self.controller

        if state.screen is Screen.AGE:
            self.stack.setCurrentWidget(self.age_page)
        else:
            self.stack.setCurrentWidget(self.movies_page)

        self._set_edit_text(self.age_edit, state.age_text)
        self._set_edit_text(self.choice_edit, state.choice_text)

        self._set_message(self.age_error_label, state.age_error)
        self._set_message(self.choice_error_label, state.choice_error)

        if state.selected_movie:
            self._set_message(
                self.selection_label,
                self._t("current_selection", movie=state.selected_movie),
            )
        else:
            self._set_message(self.selection_label, "")

    def _set_edit_text(self, edit: QLineEdit, text: str) -> None:
        if edit.text() == text:
            return
        edit.blockSignals(True)
        edit.setText(text)
        edit.blockSignals(False)

    def _set_message(self, label: QLabel, text: str) -> None:
        label.setText(text)
        label.setVisible(bool(text))

    # ---------- SIGNAL HANDLERS ----------

    def _on_age_submit(self) -> None:
        result = self.controller.submit_age()
        self._render()
        if result.accepted:
            self.choice_edit.setFocus()

    def _on_choice_submit(self) -> None:
        self.controller.submit_choice()
        self._render()

    def _on_back_to_age(self) -> None:
        self.controller.return_to_age_screen()
        self._render()
        self.age_edit.setFocus()

    def _show_movie_selected(self, movie: str) -> None:
        self._render()
        QMessageBox.information(
            self,
            self._t("movie_selected_title"),
            self._t("movie_selected_body", movie=movie),
        )
