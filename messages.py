# messages.py

from typing import Dict

MESSAGES: Dict[str, str] = {
    "app_title": "Movie Night",

    # age screen
    "age_title": "Age Check",
    "age_subtitle": "You must be over 18. Only if you are over 21 may you continue.",
    "age_placeholder": "Type your age",
    "age_button": "Check Age",

    "age_empty": "Please enter your age.",
    "age_not_a_number": "Age must be a number.",
    # 0-100 in the text, 0-120 enforced; kept as shipped
    "age_out_of_range": "Enter a realistic age between 0 and 100.",
    "age_too_young": "You are not over 18.",
    "age_borderline": "You are over 18 but not over 21, so you can't continue.",

    # movie screen
    "movies_title": "Choose a Movie",
    "movies_subtitle": "Type a number from 1–{size}:",
    "choice_placeholder": "Enter 1–{size}",
    "choice_button": "Confirm Choice",
    "back_button": "Back to Age Screen",

    "choice_empty": "Please enter a number from 1 to {size}.",
    "choice_not_a_number": "That is not a number. Enter 1–{size}.",
    "choice_out_of_range": "Please enter a number between 1 and {size}.",

    "movie_option": "{number}. {movie}",
    "current_selection": "Current selection: {movie}",
    "movie_selected_title": "Movie Selected",
    "movie_selected_body": "You chose: {movie}",
}


def get_message(key: str, **fields) -> str:
    template = MESSAGES.get(key, key)
    if fields:
        return template.format(**fields)
    return template
