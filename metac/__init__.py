"""
metac - generate C struct declarations from object schemas.

Example schema::

    obj :: Player {
        health :: int
        level :: int
    }

generates::

    typedef struct PlayerData {
       int health;
       int level;
    } PlayerData;
"""

from .codegen import (
    ConfigError,
    Diagnostic,
    DiagnosticKind,
    Field,
    FieldStatus,
    GenerationResult,
    GeneratorConfig,
    MetaObject,
    ObjectRegistry,
    ObjectStatus,
    SchemaParser,
    generate_from_text,
    get_generator,
    load_config,
    meta_parse,
)

__version__ = "0.1.0"

# Shared registry for callers that build several schema files together
default_registry = ObjectRegistry(GeneratorConfig().max_objects)


def init():
    """Empty the shared registry before a fresh multi-file build."""
    default_registry.reset()


__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Field",
    "FieldStatus",
    "GenerationResult",
    "GeneratorConfig",
    "MetaObject",
    "ObjectRegistry",
    "ObjectStatus",
    "SchemaParser",
    "default_registry",
    "generate_from_text",
    "get_generator",
    "init",
    "load_config",
    "meta_parse",
]
