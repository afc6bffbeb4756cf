# themes.py

from dataclasses import dataclass
from PyQt5.QtGui import QPalette, QColor


@dataclass
class Theme:
    name: str
    window_bg: str
    panel_bg: str
    input_bg: str
    text: str
    muted_text: str
    accent: str
    accent_text: str
    secondary_bg: str
    border: str
    error: str


DARK = Theme(
    name="dark",
    window_bg="#0f172a",
    panel_bg="#111827",
    input_bg="#0b1220",
    text="#e5e7eb",
    muted_text="#cbd5e1",
    accent="#22d3ee",
    accent_text="#0b1220",
    secondary_bg="#374151",
    border="#1f2937",
    error="#ef4444",
)

LIGHT = Theme(
    name="light",
    window_bg="#f3f4f6",
    panel_bg="#ffffff",
    input_bg="#ffffff",
    text="#111827",
    muted_text="#6b7280",
    accent="#2563eb",
    accent_text="#ffffff",
    secondary_bg="#e5e7eb",
    border="#e5e7eb",
    error="#dc2626",
)

THEMES = {
    "dark": DARK,
    "light": LIGHT,
}


def get_theme(name: str) -> Theme:
    return THEMES.get(name, DARK)


def apply_theme_to_palette(theme: Theme, palette: QPalette) -> None:
    """Set basic palette colors for the given theme."""
    window_color = QColor(theme.window_bg)
    panel_color = QColor(theme.panel_bg)
    text_color = QColor(theme.text)

    palette.setColor(QPalette.Window, window_color)
    palette.setColor(QPalette.Base, QColor(theme.input_bg))
    palette.setColor(QPalette.AlternateBase, panel_color)
    palette.setColor(QPalette.Button, panel_color)
    palette.setColor(QPalette.Text, text_color)
    palette.setColor(QPalette.WindowText, text_color)
    palette.setColor(QPalette.ButtonText, text_color)


def build_stylesheet(theme: Theme) -> str:
    return f"""
    QMainWindow {{
        background-color: {theme.window_bg};
    }}

    QFrame#card {{
        background-color: {theme.panel_bg};
        border: 1px solid {theme.border};
        border-radius: 12px;
    }}

    QLabel {{
        color: {theme.text};
    }}

    QLabel#title {{
        font-size: 24px;
        font-weight: 800;
    }}

    QLabel#subtitle {{
        color: {theme.muted_text};
    }}

    QLabel#option {{
        font-size: 16px;
    }}

    QLabel#error {{
        color: {theme.error};
        font-weight: 700;
    }}

    QLabel#info {{
        color: {theme.accent};
        font-weight: 700;
    }}

    QLineEdit {{
        background-color: {theme.input_bg};
        color: {theme.text};
        border: 1px solid {theme.secondary_bg};
        border-radius: 10px;
        padding: 10px 12px;
        selection-background-color: {theme.accent};
    }}

    QPushButton {{
        background-color: {theme.accent};
        color: {theme.accent_text};
        border-radius: 20px;
        padding: 12px 14px;
        border: none;
        font-weight: 800;
    }}

    QPushButton#secondaryButton {{
        background-color: {theme.secondary_bg};
        color: {theme.text};
    }}
    """
