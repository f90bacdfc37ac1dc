"""
Load the word lists with the current configuration and report what was found.

Answers are picked by position in the answers file, so reordering it or
adding/removing words changes the answers of past days as well.
"""
import sys

from config import Config
from errors import ConfigurationError
from game_logic import day_key_utc, select_answer, shift_day_key
from wordlists import WordlistLoader


def main() -> int:
    config = Config.from_env()
    loader = WordlistLoader(config.answers_path, config.guesses_path, word_length=config.word_length)
    try:
        words = loader.load()
    except ConfigurationError as e:
        print(f"Word lists unusable: {e}")
        return 1

    print(f"Environment: {config.env} ({'cached' if config.trusted else 'reload per request'})")
    print(f"Word length: {words.word_length}")
    for name, path in words.paths.items():
        print(f"  {name}: {path}")
    for name, count in words.counts.items():
        print(f"  {name}: {count}")
    # a changed answer for a settled day means the list or secret was edited
    yesterday = shift_day_key(day_key_utc(), -1)
    print(f"Answer for {yesterday}: {select_answer(yesterday, 0, config.secret, words.answers)}")
    print("Note: editing the order or size of the answers list changes past answers.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
