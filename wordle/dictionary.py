"""Word list loading and secret selection."""

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from wordle.validation import WORD_LENGTH, is_valid

logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = "inputs/words.yaml"

# Cache for loaded word lists (keyed by file path)
_WORDS_CACHE: Dict[str, List[str]] = {}


class DictionaryError(Exception):
    """Raised when a word list file cannot be used."""


def load_words(words_file: Union[str, Path] = DEFAULT_WORDS_FILE, use_cache: bool = True) -> List[str]:
    """Load a word list from a YAML file.

    The file holds a ``words`` key with a list of five-letter words.
    Entries are trimmed and lowercased; entries that still fail
    validation are skipped with a warning, and duplicates are dropped
    while keeping file order.

    Raises:
        DictionaryError: if the file is missing, malformed or yields no words
    """
    key = str(words_file)
    if use_cache and key in _WORDS_CACHE:
        return _WORDS_CACHE[key]

    try:
        with open(words_file, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise DictionaryError(f"Word list file not found: {words_file}")
    except yaml.YAMLError as e:
        raise DictionaryError(f"Invalid YAML in {words_file}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("words"), list):
        raise DictionaryError(f"{words_file} must contain a 'words' list")

    words: List[str] = []
    seen = set()
    skipped = 0
    for entry in data["words"]:
        word = str(entry).strip().lower()
        if not is_valid(word):
            logger.warning(f"Skipping '{entry}' in {words_file}: not a {WORD_LENGTH} letter a-z word")
            skipped += 1
            continue
        if word not in seen:
            seen.add(word)
            words.append(word)

    if not words:
        raise DictionaryError(f"No valid words found in {words_file}")

    logger.info(f"Loaded {len(words)} words from {words_file} ({skipped} skipped)")
    _WORDS_CACHE[key] = words
    return words


def choose_secret(words: List[str], seed: Optional[int] = None) -> str:
    """Pick the secret word, reproducibly when a seed is given."""
    if not words:
        raise DictionaryError("Cannot choose a secret from an empty word list")
    rng = random.Random(seed) if seed is not None else random
    return rng.choice(words)


def word_statistics(words: List[str]) -> Dict:
    """Summarize a word list for the ``check-words`` command."""
    vowels = set("aeiou")
    letter_frequency: Dict[str, int] = {}
    repeated = 0
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
        if len(set(word)) < len(word):
            repeated += 1

    total_vowels = sum(1 for word in words for char in word if char in vowels)
    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2) if words else 0.0,
        "words_with_repeats": repeated,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5],
    }
