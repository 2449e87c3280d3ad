import pytest

from qkd_otp import (
    DerivedKey,
    KeyDerivationParameters,
    KeyTooShort,
    QKDKeyDeriver,
    RandomSource,
    SeededRandomSource,
)


class ConstantBasesSource(RandomSource):
    """Returns 1 for sender bits, then alternating blocks so every basis pair disagrees."""

    def __init__(self):
        self.calls = 0

    def generate_bits(self, n):
        self.calls += 1
        if self.calls == 1:
            return [1] * n
        return [self.calls % 2] * n


@pytest.mark.parametrize("target, seed", [(16, 1), (64, 99), (200, 2024)])
def test_derive_key_returns_exact_length(target, seed):
    deriver = QKDKeyDeriver(source=SeededRandomSource(seed))
    result = deriver.derive_key(target)

    assert isinstance(result, DerivedKey)
    assert len(result.key) == target
    assert result.key == result.sifted[:target]
    assert result.stats.raw_count == target * 8
    assert result.stats.sifted_count == len(result.sifted)
    assert result.stats.kept_fraction == pytest.approx(len(result.sifted) / (target * 8))
    assert result.stats.usable_key_bytes == len(result.sifted) // 8
    assert len(result.usable_key) == 8 * (len(result.sifted) // 8)


def test_derive_key_reports_shortfall():
    deriver = QKDKeyDeriver(source=ConstantBasesSource())
    result = deriver.derive_key(16)

    assert isinstance(result, KeyTooShort)
    assert result.needed_bits == 16
    assert result.got_bits < result.needed_bits
    assert "Needed 16 bits" in result.message


def test_oversample_override_and_floor():
    deriver = QKDKeyDeriver(KeyDerivationParameters(min_raw_bits=2000), source=SeededRandomSource(3))
    result = deriver.derive_key(16)
    assert result.stats.raw_count == 2000

    result = QKDKeyDeriver(source=SeededRandomSource(3)).derive_key(16, oversample_factor=4)
    assert result.stats.raw_count == 64


def test_parameters_are_validated():
    with pytest.raises(ValueError):
        KeyDerivationParameters(oversample_factor=0)
    with pytest.raises(ValueError):
        KeyDerivationParameters(min_raw_bits=-1)
    with pytest.raises(ValueError):
        QKDKeyDeriver().derive_key(0)


def test_derive_key_never_returns_short_key():
    deriver = QKDKeyDeriver(source=SeededRandomSource(5))
    for _ in range(50):
        result = deriver.derive_key(24, oversample_factor=2)
        if isinstance(result, KeyTooShort):
            assert result.got_bits < 24
        else:
            assert len(result.key) == 24
