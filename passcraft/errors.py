"""
passcraft.errors
Exceptions raised when a generation policy is rejected.
"""


class InvalidPolicy(ValueError):
    """Base class for policies the generator refuses to run."""


class EmptyCharacterClassSet(InvalidPolicy):
    def __init__(self):
        super().__init__("At least one character type must be selected")


class LengthOutOfRange(InvalidPolicy):
    def __init__(self, length, minimum: int, maximum: int):
        super().__init__(f"Password length must be between {minimum} and {maximum} (got {length!r})")
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
