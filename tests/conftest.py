"""Shared fixtures for the metac test suite."""

import pytest

from metac.codegen import ObjectRegistry, create_parser
from metac.codegen.core.config import GeneratorConfig
from metac.codegen.languages.c import CGenerator

from .helpers import schema


@pytest.fixture
def config():
    return GeneratorConfig()


@pytest.fixture
def generator(config):
    return CGenerator(config)


@pytest.fixture
def registry(config):
    return ObjectRegistry(config.max_objects)


@pytest.fixture
def make_parser(generator, registry):
    """Factory for parsers sharing the test registry."""

    def _make(reg=None):
        return create_parser(generator, reg if reg is not None else registry)

    return _make


@pytest.fixture
def write_schema(tmp_path):
    """Write schema text to a file and return its path."""

    def _write(text: str, name: str = "data.meta"):
        path = tmp_path / name
        path.write_text(schema(text), encoding="utf-8")
        return path

    return _write
