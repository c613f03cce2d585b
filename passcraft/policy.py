"""
passcraft.policy

Character classes and the per-call generation policy.
The pool is derived from the policy on demand and never stored.
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import EmptyCharacterClassSet, LengthOutOfRange

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

MIN_LENGTH = 1
MAX_LENGTH = 128


@dataclass(frozen=True)
class GenerationPolicy:
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def enabled_classes(self) -> Tuple[str, ...]:
        """Alphabets of the enabled classes, always in upper/lower/digits/symbols order."""
        classes = []
        if self.include_uppercase:
            classes.append(UPPERCASE)
        if self.include_lowercase:
            classes.append(LOWERCASE)
        if self.include_numbers:
            classes.append(NUMBERS)
        if self.include_symbols:
            classes.append(SYMBOLS)
        return tuple(classes)

    def variety(self) -> int:
        return len(self.enabled_classes())


def build_pool(policy: GenerationPolicy) -> str:
    return "".join(policy.enabled_classes())


def validate(policy: GenerationPolicy) -> None:
    """
    Raise EmptyCharacterClassSet if no class is enabled, then
    LengthOutOfRange if length is not an int in [MIN_LENGTH, MAX_LENGTH].
    """
    if policy.variety() == 0:
        raise EmptyCharacterClassSet()
    length = policy.length
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise LengthOutOfRange(length, MIN_LENGTH, MAX_LENGTH)
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise LengthOutOfRange(length, MIN_LENGTH, MAX_LENGTH)
