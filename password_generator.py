"""
Password mixer.

Combines a list of base words with random filler characters to reach a
target length. Four complexity tiers control which character classes are
injected:

    basic    whole words + digits
    medium   whole words + special chars + digits
    hard     as medium, then every character is shuffled
    penguin  64 fully random characters, base words ignored

Every random decision goes through an injectable ``rng`` (anything with the
``random.Random`` interface). Without one, ``secrets.SystemRandom`` is used.
"""
import secrets
import string
from enum import Enum
from typing import NamedTuple, Sequence

# =========================================
# CHARACTER CLASSES
# =========================================

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARS = "!@#$%^&*"
ALL_CHARS = LOWERCASE + UPPERCASE + DIGITS + SPECIAL_CHARS

PENGUIN_LENGTH = 64


class ComplexityLevel(Enum):
    BASIC = "basic"
    MEDIUM = "medium"
    HARD = "hard"
    PENGUIN = "penguin"


class MixerConfig(NamedTuple):
    length: int = 12
    complexity: ComplexityLevel = ComplexityLevel.MEDIUM
    use_whole_words: bool = True


# Separator appended after each word in whole-word mode.
SEPARATORS = {
    ComplexityLevel.BASIC: (DIGITS,),
    ComplexityLevel.MEDIUM: (SPECIAL_CHARS, DIGITS),
    ComplexityLevel.HARD: (SPECIAL_CHARS, DIGITS),
}

# Character-mixing cycle keyed by position % 4. None = draw from the word pool.
MIXING_CYCLES = {
    ComplexityLevel.BASIC: (DIGITS, None, None, None),
    ComplexityLevel.MEDIUM: (SPECIAL_CHARS, DIGITS, None, None),
    ComplexityLevel.HARD: (SPECIAL_CHARS, DIGITS, None, None),
}


def parse_complexity(name: str) -> ComplexityLevel:
    """Case-insensitive tier lookup; anything unrecognised is basic."""
    try:
        return ComplexityLevel((name or "").lower())
    except ValueError:
        return ComplexityLevel.BASIC


# =========================================
# GENERATORS
# =========================================

def generate_penguin_password(rng) -> str:
    return ''.join(rng.choice(ALL_CHARS) for _ in range(PENGUIN_LENGTH))


def _shuffled(words: Sequence[str], rng) -> list:
    order = list(words)
    rng.shuffle(order)
    return order


def _mix_whole_words(config: MixerConfig, base_words: Sequence[str], rng) -> list:
    password = []
    separator = SEPARATORS[config.complexity]

    for word in _shuffled(base_words, rng):
        if len(password) >= config.length:
            break
        password.extend(word)
        password.extend(rng.choice(chars) for chars in separator)

    # Out of words but still short: pad from the full superset
    while len(password) < config.length:
        password.append(rng.choice(ALL_CHARS))

    return password


def _mix_characters(config: MixerConfig, base_words: Sequence[str], rng) -> list:
    pool = ''.join(_shuffled(base_words, rng))
    cycle = MIXING_CYCLES[config.complexity]

    password = []
    while len(password) < config.length:
        chars = cycle[len(password) % 4]
        if chars is None:
            chars = pool or LOWERCASE
        password.append(rng.choice(chars))
    return password


def mix_password(config: MixerConfig, base_words: Sequence[str], rng=None) -> str:
    """
    Generate one password from ``base_words``.

    An empty word list always yields "" (even for the penguin tier). The
    result is cut to exactly ``config.length`` characters, which can split a
    word or separator in half.
    """
    if not base_words:
        return ""

    if rng is None:
        rng = secrets.SystemRandom()

    if config.complexity is ComplexityLevel.PENGUIN:
        return generate_penguin_password(rng)

    if config.use_whole_words:
        password = _mix_whole_words(config, base_words, rng)
    else:
        password = _mix_characters(config, base_words, rng)

    password = password[:config.length]
    if config.complexity is ComplexityLevel.HARD:
        rng.shuffle(password)
    return ''.join(password)

