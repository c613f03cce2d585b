"""
passcraft.randomness

Random sources the generator draws unsigned 32-bit integers from.

SecureRandomSource reads the OS CSPRNG through `secrets`.
FallbackRandomSource uses the Mersenne Twister from `random` and is NOT
suitable for real passwords; constructing one always logs a warning.
"""

import logging
import os
import random
import secrets
from typing import List, Optional, Protocol

log = logging.getLogger(__name__)

UINT32_BITS = 32


class RandomSource(Protocol):
    secure: bool

    def next_uint32(self) -> int:
        ...

    def uint32s(self, count: int) -> List[int]:
        ...


class SecureRandomSource:
    secure = True

    def next_uint32(self) -> int:
        return secrets.randbits(UINT32_BITS)

    def uint32s(self, count: int) -> List[int]:
        return [self.next_uint32() for _ in range(count)]


class FallbackRandomSource:
    """
    Non-cryptographic source for environments without an OS entropy pool.
    Pass a seed to get a reproducible sequence.
    """

    secure = False

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        log.warning(
            "Using non-cryptographic random source; generated passwords are "
            "predictable and must not protect anything sensitive"
        )

    def next_uint32(self) -> int:
        return self._rng.getrandbits(UINT32_BITS)

    def uint32s(self, count: int) -> List[int]:
        return [self.next_uint32() for _ in range(count)]


_default: Optional[RandomSource] = None


def default_random_source() -> RandomSource:
    """
    Pick the process-wide source once: secure when the OS can supply
    entropy, otherwise the fallback (with a logged warning).
    """
    global _default
    if _default is None:
        try:
            os.urandom(4)
            _default = SecureRandomSource()
        except NotImplementedError:
            log.error("No OS randomness source available")
            _default = FallbackRandomSource()
    return _default
