# src/microtest/generators/random_values.py
"""Type-directed random test values.

Dispatch goes through a closed table of ValueKind variants, each tagged
with a capability category (integer, floating, text). Containers are
described by ContainerOf, which pairs a container factory with an
element kind.

Usage:
    gen = RandomValueGenerator(seed=1234)
    gen.generate("uint8")                          # 0..255
    gen.generate("int16", 100)                     # 0..100
    gen.generate(float, -1.0, 1.0)                 # -1.0..1.0
    gen.generate(str, 10)                          # 10 printable characters
    gen.generate(ContainerOf(deque, int), 5, -100, 100)

Bounds are inclusive. ``lower > upper`` and bounds outside the kind's
range are precondition violations and raise RandomSpecError.
"""

from __future__ import annotations

import random as random_module
import secrets
import string
import struct
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from microtest.contracts.enums import ValueCategory
from microtest.contracts.errors import RandomSpecError
from microtest.core.logging import get_logger

logger = get_logger(__name__)

# Printable ASCII without whitespace control characters (space .. tilde)
TEXT_ALPHABET = string.digits + string.ascii_letters + string.punctuation + " "
DEFAULT_TEXT_LENGTH = 16

_FLOAT32_MAX = 3.4028234663852886e38


@dataclass(frozen=True, slots=True)
class ValueKind:
    """One entry of the closed kind table.

    Attributes:
        name: Canonical kind name ("int16", "float32", "text", ...).
        category: Capability tag selecting the draw algorithm.
        minimum: Smallest representable value (text: shortest length).
        maximum: Largest representable value (text: longest length).
        default_lower: Lower bound when the caller gives none.
        default_upper: Upper bound when the caller gives none.
    """

    name: str
    category: ValueCategory
    minimum: int | float
    maximum: int | float
    default_lower: int | float
    default_upper: int | float

    @classmethod
    def integer(cls, name: str, bits: int, *, signed: bool) -> ValueKind:
        if signed:
            low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
        else:
            low, high = 0, 2**bits - 1
        return cls(name, ValueCategory.INTEGER, low, high, low, high)

    @classmethod
    def floating(cls, name: str, maximum: float) -> ValueKind:
        # Unbounded float draws default to the unit interval
        return cls(name, ValueCategory.FLOATING, -maximum, maximum, 0.0, 1.0)


INT8 = ValueKind.integer("int8", 8, signed=True)
UINT8 = ValueKind.integer("uint8", 8, signed=False)
INT16 = ValueKind.integer("int16", 16, signed=True)
UINT16 = ValueKind.integer("uint16", 16, signed=False)
INT32 = ValueKind.integer("int32", 32, signed=True)
UINT32 = ValueKind.integer("uint32", 32, signed=False)
INT64 = ValueKind.integer("int64", 64, signed=True)
UINT64 = ValueKind.integer("uint64", 64, signed=False)
BOOL = ValueKind("bool", ValueCategory.INTEGER, 0, 1, 0, 1)
FLOAT32 = ValueKind.floating("float32", _FLOAT32_MAX)
FLOAT64 = ValueKind.floating("float64", sys.float_info.max)
TEXT = ValueKind("text", ValueCategory.TEXT, 0, sys.maxsize, DEFAULT_TEXT_LENGTH, DEFAULT_TEXT_LENGTH)

KINDS: dict[str, ValueKind] = {
    kind.name: kind
    for kind in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, BOOL, FLOAT32, FLOAT64, TEXT)
}

# C-style and Python-type spellings accepted by resolve_kind()
ALIASES: dict[str | type, ValueKind] = {
    "char": INT8,
    "short": INT16,
    "long": INT64,
    "double": FLOAT64,
    "str": TEXT,
    "string": TEXT,
    int: INT64,
    float: FLOAT64,
    bool: BOOL,
    str: TEXT,
}


def resolve_kind(kind: ValueKind | str | type) -> ValueKind:
    """Map a kind, kind name or Python type to its table entry.

    Raises:
        RandomSpecError: If the kind is not in the table.
    """
    if isinstance(kind, ValueKind):
        return kind
    if isinstance(kind, str) and kind in KINDS:
        return KINDS[kind]
    try:
        return ALIASES[kind]
    except (KeyError, TypeError):
        raise RandomSpecError(f"Unsupported random value kind: {kind!r}. Known kinds: {sorted(KINDS)}") from None


@dataclass(frozen=True, slots=True)
class ContainerOf:
    """Container request: ``factory`` applied to independently drawn elements.

    Any factory accepting an iterable works (list, tuple, collections.deque,
    array.array partials, ...).
    """

    factory: Callable[[Iterable[Any]], Any]
    element: ValueKind | str | type


@dataclass(frozen=True, slots=True)
class RandomSpec:
    """Resolved request for one draw or one container of draws."""

    kind: ValueKind
    lower: int | float
    upper: int | float
    count: int | None = None

    @classmethod
    def build(
        cls,
        kind: ValueKind | str | type,
        bounds: tuple[int | float, ...],
        count: int | None = None,
    ) -> RandomSpec:
        """Apply the bounds rules and validate the preconditions.

        ``()`` uses the kind defaults, ``(upper,)`` means ``[0, upper]``
        (text: exact length), ``(lower, upper)`` is taken as given.

        Raises:
            RandomSpecError: On any precondition violation.
        """
        resolved = resolve_kind(kind)
        if len(bounds) == 0:
            lower, upper = resolved.default_lower, resolved.default_upper
        elif len(bounds) == 1:
            upper = bounds[0]
            lower = upper if resolved.category is ValueCategory.TEXT else 0
        elif len(bounds) == 2:
            lower, upper = bounds
        else:
            raise RandomSpecError(f"Expected at most 2 bounds, got {len(bounds)}")

        if count is not None and count < 0:
            raise RandomSpecError(f"Container count must be >= 0, got {count}")
        if resolved.category is not ValueCategory.FLOATING and (
            not isinstance(lower, int) or not isinstance(upper, int)
        ):
            raise RandomSpecError(f"{resolved.name} bounds must be integers, got {lower!r}, {upper!r}")
        if lower > upper:
            raise RandomSpecError(f"Lower bound {lower!r} is greater than upper bound {upper!r}")
        if lower < resolved.minimum or upper > resolved.maximum:
            raise RandomSpecError(
                f"Bounds [{lower!r}, {upper!r}] outside the range of {resolved.name} "
                f"[{resolved.minimum!r}, {resolved.maximum!r}]"
            )
        return cls(kind=resolved, lower=lower, upper=upper, count=count)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class RandomValueGenerator:
    """Draws random values for a closed set of kinds.

    The stream is reproducible: the effective seed is exposed as ``seed``
    and logged when the generator is (re)seeded. Without an explicit seed
    one is taken from OS entropy.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        rng: random_module.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Seed for reproducible runs (default: OS entropy).
            rng: Random instance for testing. When given, ``seed`` is
                ignored and reported as None.
        """
        self._seed: int | None = None
        if rng is not None:
            self._rng = rng
        else:
            self._rng = random_module.Random()
            self.reseed(seed)

    @property
    def seed(self) -> int | None:
        """Seed of the current stream (None when an rng was injected)."""
        return self._seed

    def reseed(self, seed: int | None = None) -> int:
        """Restart the stream from ``seed`` (or fresh entropy) and return it."""
        source = "explicit" if seed is not None else "entropy"
        if seed is None:
            seed = secrets.randbits(63)
        self._seed = seed
        self._rng.seed(seed)
        logger.debug("Random generator seeded", seed=seed, source=source)
        return seed

    def generate(self, kind: ValueKind | ContainerOf | str | type, *args: int | float) -> Any:
        """Draw a value, or a container of values.

        Scalars:    ``generate(kind)``, ``generate(kind, upper)``,
                    ``generate(kind, lower, upper)``
        Containers: ``generate(ContainerOf(factory, kind), count, *bounds)``

        Raises:
            RandomSpecError: If the request violates its preconditions.
        """
        if isinstance(kind, ContainerOf):
            if not args:
                raise RandomSpecError("Container requests need an element count")
            count, *bounds = args
            if not isinstance(count, int):
                raise RandomSpecError(f"Container count must be an integer, got {count!r}")
            spec = RandomSpec.build(kind.element, tuple(bounds), count=count)
            return kind.factory(self.draw(spec) for _ in range(count))
        return self.draw(RandomSpec.build(kind, tuple(args)))

    def draw(self, spec: RandomSpec) -> Any:
        """Draw one value for an already validated spec."""
        category = spec.kind.category
        if category is ValueCategory.INTEGER:
            value = self._rng.randint(int(spec.lower), int(spec.upper))
            return bool(value) if spec.kind is BOOL else value
        if category is ValueCategory.FLOATING:
            return self._draw_float(spec)
        length = self._rng.randint(int(spec.lower), int(spec.upper))
        return "".join(self._rng.choice(TEXT_ALPHABET) for _ in range(length))

    def _draw_float(self, spec: RandomSpec) -> float:
        lower, upper = float(spec.lower), float(spec.upper)
        r = self._rng.random()
        # Interpolate instead of lower + (upper - lower) * r, which overflows on full-range bounds
        value = lower * (1.0 - r) + upper * r
        if spec.kind is FLOAT32:
            value = _to_float32(value)
        return min(max(value, lower), upper)
