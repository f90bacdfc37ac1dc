"""
Error types raised by the puzzle engine.

Each error carries a ``reason`` code that the service facade copies into the
structured response; the message text is for logs only.
"""


class PuzzleError(Exception):
    """Base class for puzzle engine errors."""
    reason = "server_error"


class ConfigurationError(PuzzleError):
    """Word lists or secret are missing or unusable."""
    reason = "service_unavailable"


class InvalidInputError(PuzzleError):
    """Precondition failure, e.g. an empty answer pool or a bad day-key list."""
    reason = "bad_format_day_keys"


class LockedPuzzle(PuzzleError):
    """Request targets a day or slot other than the live puzzle."""
    reason = "locked"

    def __init__(self, server_day_key: str):
        super().__init__(f"Only puzzle 0 of {server_day_key} is playable")
        self.server_day_key = server_day_key


class BadFormat(PuzzleError):
    reason = "bad_format"


class NotInWordList(PuzzleError):
    reason = "not_in_word_list"
