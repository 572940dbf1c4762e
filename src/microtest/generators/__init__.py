"""Random value generation for tests."""

from microtest.generators.random_values import (
    BOOL,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    KINDS,
    TEXT,
    TEXT_ALPHABET,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    ContainerOf,
    RandomSpec,
    RandomValueGenerator,
    ValueKind,
    resolve_kind,
)

__all__ = [
    "BOOL",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "KINDS",
    "TEXT",
    "TEXT_ALPHABET",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "ContainerOf",
    "RandomSpec",
    "RandomValueGenerator",
    "ValueKind",
    "resolve_kind",
]
