"""
High-level entry point: turn a set of base words into ``count`` passwords.

    Penguin(["hello", "world"]).generate_password(3)
    # e.g. ["world@4hello", "hello!7world", "world#0hello"]
"""
import secrets
from typing import List, Optional, Sequence

from password_generator import ComplexityLevel, MixerConfig, mix_password

# =========================================
# DEFAULTS
# =========================================

DEFAULT_COMPLEXITY = ComplexityLevel.MEDIUM
DEFAULT_WHOLE_WORDS = True
DEFAULT_LENGTH = 12

DEFAULT_CONFIG = MixerConfig(DEFAULT_LENGTH, DEFAULT_COMPLEXITY, DEFAULT_WHOLE_WORDS)


def resolve_config(
    complexity: Optional[ComplexityLevel] = None,
    use_whole_words: Optional[bool] = None,
    length: Optional[int] = None,
) -> MixerConfig:
    """
    Build the mixer settings for one generation run.

    With nothing set the whole default bundle is used. As soon as any option
    is given, every missing one falls back to its own default instead.
    """
    if complexity is None and use_whole_words is None and length is None:
        return DEFAULT_CONFIG

    return MixerConfig(
        length=DEFAULT_LENGTH if length is None else length,
        complexity=DEFAULT_COMPLEXITY if complexity is None else complexity,
        use_whole_words=DEFAULT_WHOLE_WORDS if use_whole_words is None else use_whole_words,
    )


def generate(
    count: int,
    complexity: Optional[ComplexityLevel] = None,
    use_whole_words: Optional[bool] = None,
    length: Optional[int] = None,
    words: Sequence[str] = (),
    rng=None,
) -> List[str]:
    """Generate ``count`` passwords in order. Duplicates are kept."""
    config = resolve_config(complexity, use_whole_words, length)
    if rng is None:
        rng = secrets.SystemRandom()
    return [mix_password(config, words, rng) for _ in range(count)]


class Penguin:
    """Holds the base words shared by every generated password."""

    def __init__(self, base_words: Sequence[str]) -> None:
        self.base_words = list(base_words)

    def generate_password(
        self,
        count: int,
        complexity: Optional[ComplexityLevel] = None,
        use_whole_words: Optional[bool] = None,
        length: Optional[int] = None,
        rng=None,
    ) -> List[str]:
        return generate(count, complexity, use_whole_words, length, self.base_words, rng)
