"""
metac Code Generation Module

Parses object schemas and generates structure declarations from them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    build_metadata,
    generate_code,
)
from .core.objects import ObjectRegistry
from .core.parser import SchemaParser
from .core.schema import (
    Diagnostic,
    DiagnosticKind,
    Field,
    FieldStatus,
    MetaObject,
    ObjectStatus,
)
from .core.config import ConfigError, GeneratorConfig, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def create_parser(
    generator: CodeGenerator, registry: Optional[ObjectRegistry] = None
) -> SchemaParser:
    """
    Create a schema parser matching a generator's type system.

    Args:
        generator: Generator whose primitive types and naming rules apply
        registry: Object registry to fill (a fresh one if omitted)

    Returns:
        Parser ready to consume schema lines
    """
    if registry is None:
        registry = ObjectRegistry(generator.config.max_objects)

    return SchemaParser(
        registry,
        generator.create_validator(),
        generator.primitive_types,
        generator.config,
    )


def meta_parse(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    registry: Optional[ObjectRegistry] = None,
    config: ConfigLike = None,
    language: str = "c",
) -> GenerationResult:
    """
    Parse a schema file and write the generated declarations.

    Each object is written as soon as it is closed. Schema problems are
    written into the output as comments and never fail the call; only a
    stream that cannot be opened, read or written does.

    Args:
        input_path: Schema file to read
        output_path: Generated file to write
        registry: Registry to resolve against and fill. Pass the same
            registry to several calls to let later files reference objects
            from earlier ones; omit it for an independent run.
        config: Configuration as GeneratorConfig, dict, or file path
        language: Target language name

    Returns:
        GenerationResult; ``success`` is False only for stream errors
    """
    generator = get_generator(language, config)
    parser = create_parser(generator, registry)
    encoding = generator.config.encoding

    input_path = Path(input_path)
    output_path = Path(output_path)
    logger.info("Generating %s from %s", output_path, input_path)

    try:
        source = open(input_path, "r", encoding=encoding)
    except OSError as e:
        logger.error("Cannot open input file %s: %s", input_path, e)
        return GenerationResult.error(f"Cannot open input file {input_path}: {e}", e)

    objects: List[MetaObject] = []
    written: List[str] = []

    with source:
        try:
            target = open(output_path, "w", encoding=encoding, newline="\n")
        except OSError as e:
            logger.error("Cannot open output file %s: %s", output_path, e)
            return GenerationResult.error(
                f"Cannot open output file {output_path}: {e}", e
            )

        with target:
            try:
                chunk = generator.format_code(generator.file_header())
                target.write(chunk)
                written.append(chunk)

                for obj in parser.parse_lines(source):
                    chunk = generator.format_code(generator.generate_single_object(obj))
                    target.write(chunk)
                    written.append(chunk)
                    objects.append(obj)
            except (OSError, UnicodeError) as e:
                logger.error("Stream error while generating %s: %s", output_path, e)
                return GenerationResult.error(
                    f"Stream error while generating {output_path}: {e}", e
                )

    metadata = build_metadata(generator, objects)
    metadata.update({"input_file": str(input_path), "output_file": str(output_path)})

    logger.info(
        "Wrote %d object(s) to %s with %d warning(s)",
        len(objects),
        output_path,
        len(parser.diagnostics),
    )

    return GenerationResult(
        "".join(written),
        warnings=[str(d) for d in parser.diagnostics],
        metadata=metadata,
        diagnostics=list(parser.diagnostics),
    )


def generate_from_text(
    text: str,
    registry: Optional[ObjectRegistry] = None,
    config: ConfigLike = None,
    language: str = "c",
) -> GenerationResult:
    """
    Generate code from schema text held in memory.

    Args:
        text: Schema source
        registry: Registry to resolve against and fill (fresh if omitted)
        config: Configuration as GeneratorConfig, dict, or file path
        language: Target language name

    Returns:
        GenerationResult with the generated code
    """
    generator = get_generator(language, config)
    parser = create_parser(generator, registry)
    objects = parser.parse_text(text)
    return generate_code(generator, objects, parser.diagnostics)


__all__ = [
    "CodeGenerator",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Field",
    "FieldStatus",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "GeneratorRegistry",
    "MetaObject",
    "ObjectRegistry",
    "ObjectStatus",
    "RegistryError",
    "SchemaParser",
    "create_parser",
    "generate_from_text",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "meta_parse",
]
