# settings.py

from pathlib import Path
import logging
import os

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Optional; nothing here is secret.
load_dotenv(BASE_DIR / ".env")

THEME_NAME = os.getenv("MOVIE_GATE_THEME", "dark")
LOG_LEVEL  = os.getenv("MOVIE_GATE_LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Window
WINDOW_MIN_SIZE = (380, 460)
WINDOW_SIZE     = (460, 560)
