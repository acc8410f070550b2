"""Tests for the generator registry."""

import pytest

from metac.codegen import GeneratorConfig, GeneratorRegistry, RegistryError
from metac.codegen.languages.c import CGenerator
from metac.codegen.registry import (
    get_generator,
    get_language_info,
    list_supported_languages,
)


def test_c_is_registered():
    assert list_supported_languages() == ["c"]
    assert get_generator("H").language_name == "c"


def test_alias_creates_c_generator():
    generator = get_generator("h")
    assert isinstance(generator, CGenerator)
    assert generator.file_extension == ".h"


def test_generator_receives_config():
    config = GeneratorConfig(struct_suffix="Rec")
    assert get_generator("c", config).config is config
    assert get_generator("c", {"indent_size": 1}).config.indent == " "


def test_unknown_language():
    with pytest.raises(RegistryError, match="No generator registered"):
        get_generator("cobol")


def test_bad_config_path_is_wrapped(tmp_path):
    with pytest.raises(RegistryError, match="Failed to create"):
        get_generator("c", tmp_path / "missing.json")


def test_language_info():
    info = get_language_info("c")
    assert info["name"] == "c"
    assert info["class"] == "CGenerator"
    assert info["file_extension"] == ".h"
    assert info["aliases"] == ["h"]
    assert info["primitive_type_count"] > 10


def test_register_rejects_non_generators():
    registry = GeneratorRegistry()
    with pytest.raises(RegistryError):
        registry.register("py", dict)


def test_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("c", CGenerator, aliases=["h"])

    with pytest.raises(RegistryError):
        registry.register("c99", CGenerator, aliases=["c"])
    with pytest.raises(RegistryError):
        registry.register("cpp", CGenerator, aliases=["h"])

