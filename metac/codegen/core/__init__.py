"""
Core code generation components.

Provides the schema model, parser and base classes used by all language
generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    Diagnostic,
    DiagnosticKind,
    Field,
    FieldStatus,
    MetaObject,
    ObjectStatus,
)
from .objects import ObjectRegistry
from .naming import IdentifierValidator, FORBIDDEN_CHARACTERS
from .parser import ParserState, SchemaParser, parse_object_header, split_field_line
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema model
    "Diagnostic",
    "DiagnosticKind",
    "Field",
    "FieldStatus",
    "MetaObject",
    "ObjectStatus",
    "ObjectRegistry",
    # Parsing
    "ParserState",
    "SchemaParser",
    "parse_object_header",
    "split_field_line",
    # Naming
    "IdentifierValidator",
    "FORBIDDEN_CHARACTERS",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
