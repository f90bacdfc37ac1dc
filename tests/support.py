"""Shared helpers for the test suites."""
import os
from datetime import datetime, timezone

from config import Config

FIXED_NOW = datetime(2026, 1, 6, 15, 30, tzinfo=timezone.utc)
TODAY = "2026-01-06"


def write_lines(path, lines):
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")


def make_config(tmpdir, env="development", answers=("apple", "mango", "grape"),
                guesses=("crane", "slate", "oomph"), secret="k1", **overrides):
    answers_path = os.path.join(tmpdir, "answers.txt")
    guesses_path = os.path.join(tmpdir, "guesses.txt")
    if answers is not None:
        write_lines(answers_path, answers)
    if guesses is not None:
        write_lines(guesses_path, guesses)
    return Config(
        env=env,
        secret=secret,
        answers_path=answers_path,
        guesses_path=guesses_path,
        **overrides,
    )


def fixed_clock(moment=FIXED_NOW):
    return lambda: moment
