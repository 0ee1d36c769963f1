"""Tests for the FlawMarker tag."""

import pytest

from py_rng.core.alea_source import AleaSource
from py_rng.core.flawed_sources import CounterSource, LowBitsLCGSource
from py_rng.core.flaws import FlawMarker, is_flawed, requires_fairness
from py_rng.core.sources import DiverSource, Lathe32Source, LinnormSource, PermutedSource
from py_rng.core.stateful_source import StatefulSource


class TestMarkerQueries:
    """Test type-level flaw queries."""

    @pytest.mark.parametrize("kind", [CounterSource, LowBitsLCGSource])
    def test_flawed_kinds(self, kind):
        """Test that marked classes are reported as flawed."""
        assert is_flawed(kind)
        assert not requires_fairness(kind)
        assert issubclass(kind, StatefulSource)

    @pytest.mark.parametrize("kind", [
        LinnormSource, DiverSource, PermutedSource, Lathe32Source, AleaSource,
    ])
    def test_fair_kinds(self, kind):
        """Test that unmarked classes are not flawed."""
        assert not is_flawed(kind)
        assert requires_fairness(kind)

    def test_instances_resolve_to_their_type(self):
        """Test that passing an instance checks its class."""
        assert is_flawed(CounterSource(1))
        assert not is_flawed(LinnormSource(1))

    def test_instance_attribute_does_not_mark(self):
        """Test that the query is driven by type, not by instance state."""
        source = LinnormSource(1)
        source.flawed = True
        assert not is_flawed(source)

    def test_marker_has_no_behaviour(self):
        """Test that the marker carries no fields or methods."""
        public = [name for name in vars(FlawMarker) if not name.startswith("__")]
        assert public == []
        assert FlawMarker.__slots__ == ()

    def test_subclass_inherits_mark(self):
        """Test that subclasses of flawed generators stay flawed."""

        class Tweaked(CounterSource):
            pass

        assert is_flawed(Tweaked)


class TestDocumentedFlaws:
    """Test that the flawed generators show their advertised defects."""

    def test_low_bits_lcg_alternates(self):
        """Test that the lowest bit strictly alternates."""
        source = LowBitsLCGSource(2024)
        bits = [source.next(1) for _ in range(100)]
        assert all(a != b for a, b in zip(bits, bits[1:]))

    def test_counter_steps_are_constant(self):
        """Test that consecutive outputs differ by one of two amounts."""
        source = CounterSource(2024)
        values = [source.next_int() for _ in range(200)]
        steps = {(b - a) & 0xFFFFFFFF for a, b in zip(values, values[1:])}
        assert len(steps) <= 2

    def test_flawed_sources_still_honour_contract(self):
        """Test that flawed sources still respect width and copy rules."""
        for kind in (CounterSource, LowBitsLCGSource):
            source = kind(5)
            twin = source.copy()
            assert [source.next(9) for _ in range(20)] == [twin.next(9) for _ in range(20)]
            assert all(0 <= source.next(9) < 512 for _ in range(20))
