from form_state import Screen


def submit_age(window, text):
    window.age_edit.setText(text)
    window.age_btn.click()


def submit_choice(window, text):
    window.choice_edit.setText(text)
    window.choice_btn.click()


def test_starts_on_age_page(window):
    assert window.stack.currentWidget() is window.age_page
    assert window.age_error_label.isHidden()
    assert window.age_edit.maxLength() == 3
    assert window.choice_edit.maxLength() == 1


def test_catalog_is_listed(window):
    texts = [lbl.text() for _, lbl in sorted(window.option_labels.items())]
    assert texts == ["1. Superbad", "2. The Hangover", "3. Sausage Party", "4. Ted", "5. Borat"]


def test_rejected_age_shows_inline_error(window):
    submit_age(window, "20")

    assert window.controller.screen is Screen.AGE
    assert window.stack.currentWidget() is window.age_page
    assert not window.age_error_label.isHidden()
    assert window.age_error_label.text() == "You are over 18 but not over 21, so you can't continue."


def test_accepted_age_switches_page(window):
    submit_age(window, "30")

    assert window.stack.currentWidget() is window.movies_page
    assert window.choice_edit.text() == ""
    assert window.selection_label.isHidden()


def test_choice_shows_selection_and_modal(window):
    submit_age(window, "30")
    submit_choice(window, "3")

    assert window.shown_messages == [("Movie Selected", "You chose: Sausage Party")]
    assert window.selection_label.text() == "Current selection: Sausage Party"
    assert not window.selection_label.isHidden()


def test_bad_choice_shows_error_without_modal(window):
    submit_age(window, "30")
    submit_choice(window, "9")

    assert window.shown_messages == []
    assert window.choice_error_label.text() == "Please enter a number between 1 and 5."


def test_back_keeps_age_and_reentry_clears_choice(window):
    submit_age(window, "44")
    submit_choice(window, "1")

    window.back_btn.click()
    assert window.stack.currentWidget() is window.age_page
    assert window.age_edit.text() == "44"

    window.age_btn.click()
    assert window.stack.currentWidget() is window.movies_page
    assert window.choice_edit.text() == ""
    assert window.selection_label.isHidden()


def test_return_key_submits_age(window):
    window.age_edit.setText("25")
    window.age_edit.returnPressed.emit()

    assert window.stack.currentWidget() is window.movies_page


def test_return_key_submits_choice(window):
    submit_age(window, "25")
    window.choice_edit.setText("4")
    window.choice_edit.returnPressed.emit()

    assert window.controller.selected_movie == "Ted"
    assert window.shown_messages == [("Movie Selected", "You chose: Ted")]
