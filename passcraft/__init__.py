"""passcraft: random password generator with a coarse strength score."""

from .errors import InvalidPolicy, EmptyCharacterClassSet, LengthOutOfRange
from .policy import GenerationPolicy
from .generator import generate, generate_password
from .score import StrengthResult, score

__all__ = [
    "InvalidPolicy",
    "EmptyCharacterClassSet",
    "LengthOutOfRange",
    "GenerationPolicy",
    "generate",
    "generate_password",
    "StrengthResult",
    "score",
]

__version__ = "0.1.0"
