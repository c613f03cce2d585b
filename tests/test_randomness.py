import logging

from passcraft import randomness
from passcraft.randomness import FallbackRandomSource, SecureRandomSource, default_random_source


def test_secure_values_are_uint32():
    src = SecureRandomSource()
    values = src.uint32s(200)
    assert len(values) == 200
    assert all(0 <= v < 2**32 for v in values)
    assert src.secure

def test_fallback_warns_and_is_flagged(caplog):
    with caplog.at_level(logging.WARNING, logger="passcraft.randomness"):
        src = FallbackRandomSource(seed=7)
    assert not src.secure
    assert any("non-cryptographic" in r.getMessage() for r in caplog.records)
    assert all(0 <= v < 2**32 for v in src.uint32s(50))

def test_default_source_is_secure_and_shared(monkeypatch):
    monkeypatch.setattr(randomness, "_default", None)
    first = default_random_source()
    assert isinstance(first, SecureRandomSource)
    assert default_random_source() is first

def test_default_falls_back_without_os_entropy(monkeypatch, caplog):
    def no_entropy(n):
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(randomness, "_default", None)
    monkeypatch.setattr(randomness.os, "urandom", no_entropy)
    with caplog.at_level(logging.WARNING, logger="passcraft.randomness"):
        src = default_random_source()
    assert isinstance(src, FallbackRandomSource)
    assert caplog.records
