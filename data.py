# data.py

from typing import List, Tuple

# Movie catalog, shown to the user as 1..N.
MOVIES: Tuple[str, ...] = (
    "Superbad",
    "The Hangover",
    "Sausage Party",
    "Ted",
    "Borat",
)

# Age gate thresholds.
MIN_REALISTIC_AGE: int = 0
MAX_REALISTIC_AGE: int = 120
MIN_AGE_EXCLUSIVE: int = 18     # must be over 18
ENTRY_AGE_EXCLUSIVE: int = 21   # must be over 21 to continue

# Input field limits (presentation only).
AGE_MAX_LENGTH: int = 3
CHOICE_MAX_LENGTH: int = 1


def get_movie_titles() -> List[str]:
    return list(MOVIES)

