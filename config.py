"""
Runtime configuration, read from the environment (and a local .env file).
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DEV_SECRET = "dev-secret-change-me"
DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_DAY_KEYS = 20
# Client-side attempt limit, reported to clients but never enforced here
MAX_GUESSES = 6


def _int_or_default(raw: Optional[str], default: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Config:
    env: str = "development"
    secret: str = DEV_SECRET
    word_length: int = DEFAULT_WORD_LENGTH
    answers_path: str = os.path.join(BASE_DIR, "data", "answers.txt")
    guesses_path: str = os.path.join(BASE_DIR, "data", "guesses.txt")
    namespace: str = "wordle"
    max_day_keys: int = DEFAULT_MAX_DAY_KEYS
    flask_secret_key: str = "dev-secret-change-in-production"

    @property
    def trusted(self) -> bool:
        """Production: cache word lists once and enforce the word list strictly."""
        return self.env == "production"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from ``environ`` (default: os.environ after loading .env)."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        defaults = cls()
        return cls(
            env=(environ.get("APP_ENV") or defaults.env).strip().lower(),
            secret=environ.get("WORDLE_SECRET", defaults.secret),
            word_length=_int_or_default(environ.get("WORDLE_WORD_LENGTH"), DEFAULT_WORD_LENGTH),
            answers_path=environ.get("WORDLE_ANSWERS_PATH") or defaults.answers_path,
            guesses_path=environ.get("WORDLE_GUESSES_PATH") or defaults.guesses_path,
            namespace=(environ.get("WORDLE_NAMESPACE") or defaults.namespace).strip(),
            max_day_keys=_int_or_default(environ.get("WORDLE_MAX_DAY_KEYS"), DEFAULT_MAX_DAY_KEYS),
            flask_secret_key=environ.get("SECRET_KEY", defaults.flask_secret_key),
        )
