"""
Request-level facade over the puzzle engine.

The service decides which puzzle is live, gates guesses on format and word
list membership, and reveals answers for past days only. It never raises to
its caller: every failure comes back as a structured outcome.
"""
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from config import MAX_GUESSES, Config
from errors import BadFormat, ConfigurationError, InvalidInputError, LockedPuzzle, NotInWordList, PuzzleError
from game_logic import (
    day_key_to_epoch_ms,
    day_key_utc,
    evaluate_guess,
    is_solved,
    is_valid_day_key,
    puzzle_id,
    select_answer,
)
from wordlists import WordlistLoader, WordSet

logger = logging.getLogger(__name__)

LIVE_IDX = 0
DEV_SCORED_WARNING = "not_in_word_list_dev_scored"


@dataclass
class GuessOutcome:
    """Result of one guess submission."""
    ok: bool
    valid: bool = False
    reason: str = ""
    server_day_key: str = ""
    warning: str = ""
    day_key: str = ""
    idx: int = LIVE_IDX
    puzzle_id: str = ""
    guess: str = ""
    result: List[str] = field(default_factory=list)
    is_solved: bool = False
    http_status: int = 200

    def to_dict(self) -> Dict:
        if not self.ok:
            body = {"ok": False, "reason": self.reason}
            if self.server_day_key:
                body["serverDayKey"] = self.server_day_key
            return body
        if not self.valid:
            return {"ok": True, "valid": False, "reason": self.reason}
        return {
            "ok": True,
            "valid": True,
            "warning": self.warning,
            "dayKey": self.day_key,
            "idx": self.idx,
            "puzzleId": self.puzzle_id,
            "guess": self.guess,
            "result": list(self.result),
            "isSolved": self.is_solved,
        }


@dataclass
class AnswersOutcome:
    """Result of a past-answers query."""
    ok: bool
    server_day_key: str = ""
    reason: str = ""
    answers: Dict[str, str] = field(default_factory=dict)
    http_status: int = 200

    def to_dict(self) -> Dict:
        if not self.ok:
            body = {"ok": False, "reason": self.reason}
            if self.server_day_key:
                body["serverDayKey"] = self.server_day_key
            return body
        return {
            "ok": True,
            "serverDayKey": self.server_day_key,
            "idx": LIVE_IDX,
            "answers": dict(self.answers),
        }


@dataclass
class TodayOutcome:
    """What a client needs to render the live puzzle."""
    server_day_key: str
    puzzle_id: str
    word_length: int
    max_guesses: int = MAX_GUESSES
    http_status: int = 200

    def to_dict(self) -> Dict:
        return {
            "ok": True,
            "serverDayKey": self.server_day_key,
            "idx": LIVE_IDX,
            "puzzleId": self.puzzle_id,
            "wordLength": self.word_length,
            "maxGuesses": self.max_guesses,
        }


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PuzzleService:
    """
    Daily puzzle facade.

    Args:
        config: runtime configuration; ``config.trusted`` selects caching and
            strict word list enforcement
        loader: word list loader, built from ``config`` when omitted
        clock: returns the current instant, UTC aware
    """

    def __init__(self, config: Config, loader: Optional[WordlistLoader] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.config = config
        self.loader = loader or WordlistLoader(
            config.answers_path,
            config.guesses_path,
            word_length=config.word_length,
            cache=config.trusted,
        )
        self.clock = clock or _utc_now
        self._guess_re = re.compile(rf"^[a-z]{{{config.word_length}}}$")

    def warm(self) -> WordSet:
        """Load the word lists now; raises ConfigurationError if they are unusable."""
        return self.loader.load()

    def reload(self) -> WordSet:
        return self.loader.reload()

    def server_day_key(self) -> str:
        return day_key_utc(self.clock())

    def _answer_for(self, day_key: str, words: WordSet) -> str:
        return select_answer(day_key, LIVE_IDX, self.config.secret, words.answers)

    # Guess submission
    def _check_live(self, day_key, idx, server_day_key: str) -> None:
        if day_key != server_day_key or idx != LIVE_IDX or isinstance(idx, bool):
            raise LockedPuzzle(server_day_key)

    def _normalize_guess(self, guess_raw) -> str:
        guess = str(guess_raw if guess_raw is not None else "").strip().lower()
        if not self._guess_re.match(guess):
            raise BadFormat(f"Guess must be {self.config.word_length} letters a-z")
        return guess

    def submit_guess(self, day_key, idx, guess_raw) -> GuessOutcome:
        """Score one guess against the live puzzle."""
        server_day_key = self.server_day_key()
        try:
            self._check_live(day_key, idx, server_day_key)
            guess = self._normalize_guess(guess_raw)

            words = self.loader.load()
            warning = ""
            if not words.is_allowed(guess):
                if self.config.trusted:
                    raise NotInWordList(guess)
                warning = DEV_SCORED_WARNING

            answer = self._answer_for(server_day_key, words)
            verdict = evaluate_guess(guess, answer)
            return GuessOutcome(
                ok=True,
                valid=True,
                warning=warning,
                day_key=server_day_key,
                idx=LIVE_IDX,
                puzzle_id=puzzle_id(self.config.namespace, server_day_key, LIVE_IDX),
                guess=guess,
                result=verdict,
                is_solved=is_solved(verdict),
            )
        except LockedPuzzle as e:
            return GuessOutcome(ok=False, reason=e.reason, server_day_key=e.server_day_key, http_status=403)
        except (BadFormat, NotInWordList) as e:
            return GuessOutcome(ok=True, valid=False, reason=e.reason)
        except ConfigurationError as e:
            logger.error("Puzzle unavailable: %s", e)
            return GuessOutcome(ok=False, reason=e.reason, http_status=503)
        except Exception:
            logger.exception("Unexpected error while scoring a guess")
            return GuessOutcome(ok=False, reason=PuzzleError.reason, http_status=500)

    # Past answers
    def _wanted_day_keys(self, requested) -> List[str]:
        if isinstance(requested, (str, bytes)) or not isinstance(requested, (list, tuple)):
            raise InvalidInputError("dayKeys must be a list")
        cleaned = (str(d if d is not None else "").strip() for d in requested)
        return [d for d in cleaned if is_valid_day_key(d)][: self.config.max_day_keys]

    def get_past_answers(self, idx, requested_day_keys) -> AnswersOutcome:
        """Answers for requested days strictly before today; everything else is dropped."""
        server_day_key = self.server_day_key()
        try:
            if idx != LIVE_IDX or isinstance(idx, bool):
                raise LockedPuzzle(server_day_key)
            wanted = self._wanted_day_keys(requested_day_keys)

            server_ms = day_key_to_epoch_ms(server_day_key)
            # never reveal today's or a future answer
            past = [dk for dk in dict.fromkeys(wanted) if day_key_to_epoch_ms(dk) < server_ms]

            answers = {}
            if past:
                words = self.loader.load()
                answers = {dk: self._answer_for(dk, words) for dk in past}
            return AnswersOutcome(ok=True, server_day_key=server_day_key, answers=answers)
        except LockedPuzzle as e:
            return AnswersOutcome(ok=False, server_day_key=e.server_day_key, reason=e.reason, http_status=403)
        except InvalidInputError as e:
            return AnswersOutcome(ok=False, server_day_key=server_day_key, reason=e.reason, http_status=400)
        except ConfigurationError as e:
            logger.error("Puzzle unavailable: %s", e)
            return AnswersOutcome(ok=False, reason=e.reason, http_status=503)
        except Exception:
            logger.exception("Unexpected error while resolving past answers")
            return AnswersOutcome(ok=False, reason=PuzzleError.reason, http_status=500)

    def today(self) -> TodayOutcome:
        server_day_key = self.server_day_key()
        return TodayOutcome(
            server_day_key=server_day_key,
            puzzle_id=puzzle_id(self.config.namespace, server_day_key, LIVE_IDX),
            word_length=self.config.word_length,
        )
