"""Tests for the BitSource contract."""

import pytest

from py_rng.config import settings
from py_rng.core.alea_source import AleaSource
from py_rng.core.bit_source import BitSource, validate_bits
from py_rng.core.errors import InvalidArgument, RNGError
from py_rng.core.flawed_sources import CounterSource, LowBitsLCGSource
from py_rng.core.sources import DiverSource, Lathe32Source, LinnormSource, PermutedSource

SOURCE_FACTORIES = [
    lambda: LinnormSource(12345),
    lambda: DiverSource(12345),
    lambda: PermutedSource(12345),
    lambda: Lathe32Source(12345),
    lambda: AleaSource("bit-source"),
    lambda: CounterSource(12345),
    lambda: LowBitsLCGSource(12345),
]


class FixedWordSource(BitSource):
    """Replays a fixed list of 32-bit words."""

    def __init__(self, words):
        self.words = list(words)

    def next_int(self):
        return self.words.pop(0)


@pytest.fixture(params=SOURCE_FACTORIES, ids=lambda f: type(f()).__name__)
def source(request):
    return request.param()


class TestNextBits:
    """Test next(bits) range guarantees."""

    @pytest.mark.parametrize("bits", range(1, 33))
    def test_values_within_requested_width(self, source, bits):
        """Test that every draw fits in the requested number of bits."""
        for _ in range(100):
            value = source.next(bits)
            assert 0 <= value < (1 << bits)

    def test_full_width_reaches_upper_half(self, source):
        """Test that 32-bit draws cover the top of the unsigned range."""
        values = [source.next(32) for _ in range(200)]
        assert max(values) >= 1 << 31

    def test_every_call_advances(self, source):
        """Test that consecutive 32-bit draws are not served from a cache."""
        values = [source.next(32) for _ in range(50)]
        assert len(set(values)) > 45

    def test_next_int_is_unsigned_32_bit(self, source):
        """Test next_int range."""
        for _ in range(100):
            assert 0 <= source.next_int() <= 0xFFFFFFFF

    def test_next_long_is_unsigned_64_bit(self, source):
        """Test next_long range."""
        values = [source.next_long() for _ in range(100)]
        assert all(0 <= v < 1 << 64 for v in values)
        assert len(set(values)) == 100


class TestDefaultComposition:
    """Test the default next/next_long built on next_int."""

    def test_next_keeps_high_bits(self):
        """Test that next(bits) takes the top bits of a 32-bit word."""
        source = FixedWordSource([0xF0000000, 0xF0000000, 0x80000001])
        assert source.next(4) == 0xF
        assert source.next(32) == 0xF0000000
        assert source.next(1) == 1

    def test_next_long_draws_high_word_first(self):
        """Test that next_long concatenates two draws, high word first."""
        source = FixedWordSource([0x01234567, 0x89ABCDEF])
        assert source.next_long() == 0x0123456789ABCDEF

    def test_lathe_uses_default_next_long(self):
        """Test that a 32-bit generator's next_long is two next_int calls."""
        a = Lathe32Source(99)
        b = a.copy()
        high = b.next_int()
        low = b.next_int()
        assert a.next_long() == (high << 32) | low


class TestBitsValidation:
    """Test handling of bit requests outside 1..32."""

    @pytest.mark.parametrize("bits", [0, 33, -1, 64])
    def test_out_of_range_raises(self, bits):
        """Test strict policy rejects out-of-range widths."""
        with pytest.raises(InvalidArgument):
            LinnormSource(1).next(bits)

    @pytest.mark.parametrize(
        "kind", [LinnormSource, DiverSource, PermutedSource, Lathe32Source, CounterSource, LowBitsLCGSource]
    )
    @pytest.mark.parametrize("bits", [0, 33])
    def test_rejected_width_leaves_state_unchanged(self, kind, bits):
        """Test that a rejected next(bits) does not advance the generator."""
        source = kind(42)
        twin = source.copy()

        with pytest.raises(InvalidArgument):
            source.next(bits)

        assert source.get_state() == twin.get_state()
        assert [source.next(16) for _ in range(5)] == [twin.next(16) for _ in range(5)]

    def test_rejected_width_does_not_step_alea(self):
        """Test that a rejected next(bits) does not consume an Alea step."""
        source = AleaSource("reject")
        with pytest.raises(InvalidArgument):
            source.next(0)
        assert source.call_count == 0
        assert source.next_int() == AleaSource("reject").next_int()

    @pytest.mark.parametrize("bits", [1.5, "8", None, True])
    def test_non_int_raises(self, bits):
        """Test that non-integer widths are always rejected."""
        with pytest.raises(InvalidArgument):
            validate_bits(bits)

    def test_error_types(self):
        """Test that InvalidArgument is both an RNGError and a ValueError."""
        with pytest.raises(ValueError):
            validate_bits(0)
        assert issubclass(InvalidArgument, RNGError)

    def test_clamp_policy(self, monkeypatch):
        """Test that the clamp policy clamps instead of raising."""
        monkeypatch.setattr(settings, "bits_policy", "clamp")
        assert validate_bits(0) == 1
        assert validate_bits(-7) == 1
        assert validate_bits(40) == 32

        source = LinnormSource(3)
        for _ in range(50):
            assert source.next(0) in (0, 1)
            assert 0 <= source.next(99) < 1 << 32

    def test_clamp_policy_still_rejects_non_int(self, monkeypatch):
        """Test that clamping does not apply to non-integers."""
        monkeypatch.setattr(settings, "bits_policy", "clamp")
        with pytest.raises(InvalidArgument):
            validate_bits(2.0)
