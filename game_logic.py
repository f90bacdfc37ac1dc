"""
Pure puzzle logic: day keys, answer selection and guess scoring.

Nothing in here does I/O or keeps state, so every function is safe to call
from concurrent requests.
"""
import hashlib
import hmac
import re
from collections import Counter
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from errors import InvalidInputError

DAY_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
SEED_HEX_CHARS = 12  # 48 bits
MS_PER_DAY = 24 * 60 * 60 * 1000

CORRECT = "correct"
PRESENT = "present"
ABSENT = "absent"


# Day keys
def day_key_utc(moment: Optional[datetime] = None) -> str:
    """Format the UTC calendar date of ``moment`` (default: now) as YYYY-MM-DD."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def day_key_to_epoch_ms(day_key: str) -> Optional[int]:
    """Return UTC midnight of ``day_key`` in epoch milliseconds, or None if malformed."""
    if not isinstance(day_key, str) or not DAY_KEY_RE.fullmatch(day_key):
        return None
    try:
        midnight = datetime.strptime(day_key, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        # Pattern matches but the date does not exist, e.g. 2026-02-30
        return None
    return int(midnight.timestamp()) * 1000


def is_valid_day_key(day_key) -> bool:
    return day_key_to_epoch_ms(day_key) is not None


def shift_day_key(day_key: str, days: int) -> str:
    """Move ``day_key`` by a whole number of days, e.g. -1 for yesterday."""
    ms = day_key_to_epoch_ms(day_key)
    if ms is None:
        raise ValueError(f"Malformed day key: {day_key!r}")
    shifted = datetime.fromtimestamp((ms + days * MS_PER_DAY) / 1000, tz=timezone.utc)
    return day_key_utc(shifted)


def puzzle_id(namespace: str, day_key: str, idx: int) -> str:
    """Opaque correlation token for a puzzle slot."""
    return f"{namespace}:{day_key}:{idx}"


# Answer selection
def _hmac_hex(secret: str, message: str) -> str:
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def select_answer(day_key: str, idx: int, secret: str, answers: Sequence[str]) -> str:
    """
    Pick the answer for puzzle slot ``(day_key, idx)``.

    The first 48 bits of HMAC-SHA256(secret, "<day_key>:<idx>") index into
    ``answers``. The same inputs always give the same word, and the order and
    size of ``answers`` are part of the input: changing either changes past
    answers too.

    Raises:
        InvalidInputError: if ``answers`` is empty
    """
    if not answers:
        raise InvalidInputError("No answers configured")
    seed = int(_hmac_hex(secret, f"{day_key}:{idx}")[:SEED_HEX_CHARS], 16)
    return answers[seed % len(answers)]


# Guess scoring
def evaluate_guess(guess: str, answer: str) -> List[str]:
    """
    Score ``guess`` against ``answer`` letter by letter.

    Both words must already be validated to the same length. Exact matches are
    taken first, then misplaced letters are credited only while the answer
    still has unmatched copies of that letter.
    """
    result = [ABSENT] * len(answer)
    remaining = Counter(answer)

    # First pass: exact matches use up their letter
    for i, (a, g) in enumerate(zip(answer, guess)):
        if g == a:
            result[i] = CORRECT
            remaining[g] -= 1

    # Second pass: misplaced letters, limited by what is left
    for i, g in enumerate(guess):
        if result[i] == CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = PRESENT
            remaining[g] -= 1

    return result


def is_solved(verdict: Sequence[str]) -> bool:
    return bool(verdict) and all(tag == CORRECT for tag in verdict)
