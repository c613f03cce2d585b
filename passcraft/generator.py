"""
passcraft.generator
Random password generator drawing from an injectable random source.
"""

import logging
from typing import Optional

from .policy import GenerationPolicy, build_pool, validate
from .randomness import RandomSource, default_random_source

log = logging.getLogger(__name__)


def generate(policy: GenerationPolicy, source: Optional[RandomSource] = None) -> str:
    """
    Generate a password of exactly ``policy.length`` characters.

    Each character is ``pool[draw % len(pool)]`` for an independent
    32-bit draw. The modulo bias for pools of at most 88 characters is
    negligible and accepted. Enabled classes are not guaranteed to
    appear in the output.

    Raises EmptyCharacterClassSet or LengthOutOfRange for invalid policies.
    """
    validate(policy)
    pool = build_pool(policy)
    if source is None:
        source = default_random_source()
    if not getattr(source, "secure", True):
        log.warning("Generating password with an insecure random source")
    log.debug("Generating %d characters from a pool of %d", policy.length, len(pool))

    draws = source.uint32s(policy.length)
    return "".join(pool[d % len(pool)] for d in draws)


def generate_password(
    length: int = 16,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    source: Optional[RandomSource] = None,
) -> str:
    policy = GenerationPolicy(
        length=length,
        include_uppercase=use_upper,
        include_lowercase=use_lower,
        include_numbers=use_digits,
        include_symbols=use_symbols,
    )
    return generate(policy, source)
