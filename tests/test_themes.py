from messages import MESSAGES, get_message
from themes import DARK, LIGHT, build_stylesheet, get_theme


def test_get_theme_by_name():
    assert get_theme("dark") is DARK
    assert get_theme("light") is LIGHT


def test_unknown_theme_falls_back_to_dark():
    assert get_theme("nope") is DARK


def test_stylesheet_uses_theme_colors():
    sheet = build_stylesheet(DARK)
    assert DARK.accent in sheet
    assert DARK.error in sheet
    assert "QPushButton#secondaryButton" in sheet


def test_unknown_message_key_returns_key():
    assert get_message("missing") == "missing"


def test_message_fields_are_formatted():
    assert get_message("movie_selected_body", movie="Ted") == "You chose: Ted"
    assert get_message("age_empty") == MESSAGES["age_empty"]
