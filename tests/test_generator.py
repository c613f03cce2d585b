import pytest

from passcraft.errors import EmptyCharacterClassSet, InvalidPolicy, LengthOutOfRange
from passcraft.generator import generate, generate_password
from passcraft.policy import GenerationPolicy, LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE
from passcraft.randomness import FallbackRandomSource


class FixedSource:
    """Replays the given draws in order."""
    secure = True

    def __init__(self, draws):
        self.draws = list(draws)

    def next_uint32(self):
        return self.draws.pop(0)

    def uint32s(self, count):
        return [self.next_uint32() for _ in range(count)]


def test_length_is_exact():
    for length in (1, 6, 16, 32, 128):
        pw = generate(GenerationPolicy(length=length))
        assert len(pw) == length

def test_only_enabled_classes_used():
    policy = GenerationPolicy(length=128, include_uppercase=False, include_symbols=False)
    pw = generate(policy)
    allowed = set(LOWERCASE + NUMBERS)
    assert set(pw) <= allowed

def test_symbols_only():
    policy = GenerationPolicy(
        length=64,
        include_uppercase=False,
        include_lowercase=False,
        include_numbers=False,
    )
    assert set(generate(policy)) <= set(SYMBOLS)

def test_no_classes_raises_regardless_of_length():
    for length in (0, 1, 16, 500):
        policy = GenerationPolicy(
            length=length,
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(EmptyCharacterClassSet):
            generate(policy)

def test_length_bounds():
    for bad in (0, 129, -5):
        with pytest.raises(LengthOutOfRange):
            generate(GenerationPolicy(length=bad))
    assert len(generate(GenerationPolicy(length=1))) == 1
    assert len(generate(GenerationPolicy(length=128))) == 128

def test_errors_are_value_errors():
    try:
        generate_password(length=0)
        raised = False
    except ValueError as e:
        raised = isinstance(e, InvalidPolicy)
    assert raised

def test_non_integer_length_rejected():
    with pytest.raises(LengthOutOfRange):
        generate(GenerationPolicy(length=True))
    with pytest.raises(LengthOutOfRange):
        generate(GenerationPolicy(length=8.0))

def test_draws_map_to_pool_by_modulo():
    # pool is uppercase + digits = 36 characters
    policy = GenerationPolicy(length=4, include_lowercase=False, include_symbols=False)
    pool = UPPERCASE + NUMBERS
    draws = [0, 25, 26, 2**32 - 1]
    pw = generate(policy, FixedSource(draws))
    assert pw == "".join(pool[d % 36] for d in draws)
    assert pw[:3] == "AZ0"

def test_pool_order_is_fixed():
    policy = GenerationPolicy(length=4)
    pw = generate(policy, FixedSource([0, 26, 52, 62]))
    assert pw == "Aa0!"

def test_seeded_fallback_is_reproducible():
    policy = GenerationPolicy(length=20)
    a = generate(policy, FallbackRandomSource(seed=42))
    b = generate(policy, FallbackRandomSource(seed=42))
    assert a == b

def test_insecure_source_is_logged(caplog):
    with caplog.at_level("WARNING"):
        generate(GenerationPolicy(length=8), FallbackRandomSource(seed=1))
    assert any("insecure" in r.getMessage() for r in caplog.records)

def test_keyword_helper_matches_policy():
    pw = generate_password(length=10, use_symbols=False, source=FixedSource(range(10)))
    assert pw == (UPPERCASE + LOWERCASE + NUMBERS)[:10]
