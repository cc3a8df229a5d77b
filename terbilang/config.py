"""Environment-driven settings, read on demand.

Process environment variables win; a .env file in the working directory
fills in anything unset without being copied into os.environ.
"""

import os
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

BUNDLED_LANG_DIR = Path(__file__).parent / "lang"


def default_language() -> str:
    """Language used by terbilang() until .language() picks another one."""
    return _setting("TERBILANG_LANGUAGE") or "en"


def lang_dir() -> Path:
    """Directory searched for <code>.json rule tables."""
    return Path(_setting("TERBILANG_LANG_DIR") or BUNDLED_LANG_DIR)


def _setting(name: str) -> str | None:
    value = os.getenv(name)
    if value is not None:
        return value
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return None
    return dotenv_values(dotenv_path).get(name)
