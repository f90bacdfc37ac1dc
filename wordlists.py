"""
Loading of the answer and allowed-guess word lists.

Both files hold one word per line. Lines are trimmed and lowercased, and
anything that is not exactly ``word_length`` ASCII letters is skipped.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordSet:
    """Immutable snapshot of both word lists."""
    answers: Tuple[str, ...]
    guesses: Tuple[str, ...]
    allowed_guesses: FrozenSet[str]
    word_length: int
    paths: Dict[str, str]

    @property
    def counts(self) -> Dict[str, int]:
        return {
            "answers": len(self.answers),
            "guesses": len(self.guesses),
            "total_allowed": len(self.allowed_guesses),
        }

    def is_allowed(self, word: str) -> bool:
        return word in self.allowed_guesses


def normalize_lines(text: str, word_length: int) -> List[str]:
    """Return the valid words of ``text`` in order, without duplicates."""
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
    words = {}
    for raw in (text or "").splitlines():
        w = raw.strip().lower()
        if w and pattern.match(w):
            words[w] = None
    return list(words)


def _read_text(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read word list {path}: {e}") from e


class WordlistLoader:
    """
    Builds a WordSet from the two word list files.

    With ``cache=True`` the first successful load is kept for the life of the
    object. With ``cache=False`` every ``load()`` rereads the files, so edits
    show up without a restart.
    """

    def __init__(self, answers_path: str, guesses_path: str, word_length: int = 5, cache: bool = True):
        self.answers_path = answers_path
        self.guesses_path = guesses_path
        self.word_length = word_length
        self.cache = cache
        self._cached: Optional[WordSet] = None

    def load(self) -> WordSet:
        if not self.cache:
            return self._build()
        if self._cached is None:
            self._cached = self._build()
        return self._cached

    def reload(self) -> WordSet:
        """Rebuild from disk and replace the cached set, regardless of mode."""
        self._cached = self._build()
        return self._cached

    def _build(self) -> WordSet:
        answers_text = _read_text(self.answers_path)
        if answers_text is None:
            raise ConfigurationError(f"Answers list not found: {self.answers_path}")
        answers = normalize_lines(answers_text, self.word_length)
        if not answers:
            raise ConfigurationError(
                f"Answers list has no valid {self.word_length}-letter words: {self.answers_path}"
            )

        guesses_text = _read_text(self.guesses_path)
        if guesses_text is None:
            logger.warning("Guess list not found at %s, only answers will be accepted", self.guesses_path)
        guesses = normalize_lines(guesses_text, self.word_length)

        word_set = WordSet(
            answers=tuple(answers),
            guesses=tuple(guesses),
            # answers are always legal guesses
            allowed_guesses=frozenset(answers).union(guesses),
            word_length=self.word_length,
            paths={"answers": self.answers_path, "guesses": self.guesses_path},
        )
        logger.info(
            "Loaded word lists: %d answers, %d guesses, %d allowed",
            len(word_set.answers), len(word_set.guesses), len(word_set.allowed_guesses),
        )
        return word_set
