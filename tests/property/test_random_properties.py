# tests/property/test_random_properties.py
"""Property tests for random value bounds and precondition rejection."""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from microtest.contracts.errors import RandomSpecError
from microtest.generators.random_values import KINDS, ContainerOf, RandomValueGenerator
from tests.property.settings import QUICK_SETTINGS, STANDARD_SETTINGS

integer_kinds = st.sampled_from(["int8", "uint8", "int16", "uint16", "int32", "uint32", "int64", "uint64"])
seeds = st.integers(min_value=0, max_value=2**63 - 1)


@st.composite
def integer_requests(draw: st.DrawFn) -> tuple[str, int, int]:
    name = draw(integer_kinds)
    kind = KINDS[name]
    low = draw(st.integers(min_value=int(kind.minimum), max_value=int(kind.maximum)))
    high = draw(st.integers(min_value=low, max_value=int(kind.maximum)))
    return name, low, high


class TestRandomProperties:
    @given(request=integer_requests(), seed=seeds)
    @STANDARD_SETTINGS
    def test_integers_within_bounds(self, request: tuple[str, int, int], seed: int) -> None:
        name, low, high = request
        value = RandomValueGenerator(seed=seed).generate(name, low, high)
        assert low <= value <= high

    @given(
        low=st.floats(min_value=-1e300, max_value=1e300),
        high=st.floats(min_value=-1e300, max_value=1e300),
        seed=seeds,
    )
    @STANDARD_SETTINGS
    def test_floats_within_bounds(self, low: float, high: float, seed: int) -> None:
        low, high = min(low, high), max(low, high)
        value = RandomValueGenerator(seed=seed).generate(float, low, high)
        assert low <= value <= high

    @given(count=st.integers(min_value=0, max_value=50), length=st.integers(min_value=0, max_value=40), seed=seeds)
    @STANDARD_SETTINGS
    def test_text_containers(self, count: int, length: int, seed: int) -> None:
        values = RandomValueGenerator(seed=seed).generate(ContainerOf(list, str), count, length)
        assert len(values) == count
        assert all(len(v) == length for v in values)

    @given(request=integer_requests(), seed=seeds)
    @STANDARD_SETTINGS
    def test_same_seed_same_value(self, request: tuple[str, int, int], seed: int) -> None:
        name, low, high = request
        assert RandomValueGenerator(seed=seed).generate(name, low, high) == RandomValueGenerator(
            seed=seed
        ).generate(name, low, high)

    @given(name=integer_kinds, low=st.integers(), high=st.integers())
    @QUICK_SETTINGS
    def test_inverted_bounds_rejected(self, name: str, low: int, high: int) -> None:
        assume(low > high)
        with pytest.raises(RandomSpecError):
            RandomValueGenerator(seed=0).generate(name, low, high)
