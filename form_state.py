# form_state.py

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from data import get_movie_titles
from validation import (
    AgeValidationResult,
    ChoiceValidationResult,
    evaluate_age,
    evaluate_choice,
)

logger = logging.getLogger(__name__)

MovieNotifier = Callable[[str], None]


class Screen(Enum):
    AGE = "age"
    MOVIES = "movies"


class InvalidScreenError(RuntimeError):
    """A submit was routed to a screen that is not active."""


class FormController:
    """
    Holds the whole form state and the transitions between the two screens.

    The window reads the attributes to render and calls the submit / back
    methods from its button handlers. ``on_movie_selected`` is called after
    a valid pick has been stored.
    """

    def __init__(
        self,
        catalog: Optional[Sequence[str]] = None,
        on_movie_selected: Optional[MovieNotifier] = None,
    ):
        if catalog is None:
            catalog = get_movie_titles()
        self.catalog: Sequence[str] = tuple(catalog)
        self.on_movie_selected = on_movie_selected

        self.screen: Screen = Screen.AGE

        # age screen
        self.age_text: str = ""
        self.age_error: str = ""

        # movie screen
        self.choice_text: str = ""
        self.choice_error: str = ""
        self.selected_movie: Optional[str] = None

    # ---------- input ----------

    def set_age_text(self, text: str) -> None:
        self.age_text = text

    def set_choice_text(self, text: str) -> None:
        self.choice_text = text

    # ---------- age screen ----------

    def submit_age(self, text: Optional[str] = None) -> AgeValidationResult:
        self._require_screen(Screen.AGE)
        if text is not None:
            self.age_text = text

        self.age_error = ""
        result = evaluate_age(self.age_text)

        if result.accepted:
            logger.info("Age %s accepted", result.age)
            self.advance_to_movies()
        else:
            logger.debug("Age input rejected: %s", result.status.value)
            self.age_error = result.message
        return result

    def advance_to_movies(self) -> None:
        self.reset_selection()
        self.screen = Screen.MOVIES
        logger.info("Screen -> %s", self.screen.value)

    # ---------- movie screen ----------

    def reset_selection(self) -> None:
        self.choice_text = ""
        self.choice_error = ""
        self.selected_movie = None

    def submit_choice(self, text: Optional[str] = None) -> ChoiceValidationResult:
        self._require_screen(Screen.MOVIES)
        if text is not None:
            self.choice_text = text

        self.choice_error = ""
        result = evaluate_choice(self.choice_text, self.catalog)

        if not result.accepted:
            logger.debug("Movie choice rejected: %s", result.status.value)
            self.choice_error = result.message
            return result

        self.selected_movie = result.movie
        logger.info("Movie selected: %s", result.movie)
        if self.on_movie_selected is not None:
            self.on_movie_selected(result.movie)
        return result

    def return_to_age_screen(self) -> None:
        # age_text stays as typed
        self.screen = Screen.AGE
        logger.info("Screen -> %s", self.screen.value)

    def _require_screen(self, screen: Screen) -> None:
        if self.screen is not screen:
            raise InvalidScreenError(
                f"expected screen {screen.value!r}, current is {self.screen.value!r}"
            )
