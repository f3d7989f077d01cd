# core/config.py

"""
Central configuration module.

Loads environment variables from a `.env` file (if present) and exposes them as typed constants.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# --- storage ---
DATA_DIR: str = os.path.expanduser(
    os.getenv("TUTORLY_DATA_DIR", os.path.join("~", ".tutorly", "data"))
)

# --- logging ---
LOG_LEVEL: str = os.getenv("TUTORLY_LOG_LEVEL", "WARNING").upper()

# --- undo history ---
UNDO_LIMIT: int = int(os.getenv("TUTORLY_UNDO_LIMIT", "50"))
