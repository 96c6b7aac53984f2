"""Model membership checks."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from chatwire_providers.base.registry import ModelRegistry, normalize_model_descriptor


@dataclass
class _Request:
    model: str


@pytest.fixture()
def registry():
    return ModelRegistry("acme", ["b-model", "a-model"], default_model="a-model")


@pytest.mark.parametrize("descriptor", ["a-model", {"model": "a-model"}, _Request("a-model"), " a-model "])
def test_supports_any_descriptor_shape(registry, descriptor):
    assert registry.supports(descriptor)  # nosec B101


@pytest.mark.parametrize("descriptor", ["c-model", {"model": "c-model"}, {}, None, 3, _Request(""), {"model": None}])
def test_rejects_unknown_or_empty(registry, descriptor):
    assert registry.supports(descriptor) is False  # nosec B101


def test_available_is_sorted(registry):
    assert registry.available() == ["a-model", "b-model"]  # nosec B101
    assert registry.default_model == "a-model"  # nosec B101
    assert registry.models == frozenset({"a-model", "b-model"})  # nosec B101


def test_normalize_model_descriptor():
    assert normalize_model_descriptor({"model": " x "}) == "x"  # nosec B101
    assert normalize_model_descriptor(object()) is None  # nosec B101
