"""Tests for the generator registry."""

import pytest

from geopattern.engine.context import GenerationContext
from geopattern.engine.registry import (
    GENERATORS,
    GeneratorRegistry,
    GeneratorSpec,
    UnknownGeneratorError,
    get_registry,
)
from tests.conftest import ALL_F_HASH, ALL_ZERO_HASH


def _noop(ctx: GenerationContext) -> None:
    pass


def test_all_generators_registered():
    import geopattern.engine.pattern  # noqa: F401

    registry = get_registry()
    assert registry.count == 16
    assert [spec.name for spec in registry.all()] == list(GENERATORS)
    assert all(spec.description for spec in registry.all())


def test_register_and_get():
    registry = GeneratorRegistry()
    registry.register(GeneratorSpec(name="xes", fn=_noop))
    assert "xes" in registry
    assert registry.get("xes").fn is _noop


def test_register_duplicate():
    registry = GeneratorRegistry()
    registry.register(GeneratorSpec(name="xes", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(GeneratorSpec(name="xes", fn=_noop))


def test_register_name_outside_set():
    with pytest.raises(ValueError):
        GeneratorRegistry().register(GeneratorSpec(name="stars", fn=_noop))


def test_unknown_generator_error():
    with pytest.raises(UnknownGeneratorError) as exc:
        get_registry().get("stars")
    assert exc.value.name == "stars"
    assert str(exc.value) == "The generator stars does not exist."
    assert isinstance(exc.value, ValueError)


def test_select_uses_nibble_20(github_hash):
    registry = get_registry()
    assert registry.select(github_hash).name == "squares"
    assert registry.select(ALL_ZERO_HASH).name == "octagons"
    assert registry.select(ALL_F_HASH).name == "chevrons"


def test_resolve_prefers_explicit_name(github_hash):
    registry = get_registry()
    assert registry.resolve("plaid", github_hash).name == "plaid"
    assert registry.resolve(None, github_hash).name == "squares"
    assert registry.resolve("", github_hash).name == "squares"
