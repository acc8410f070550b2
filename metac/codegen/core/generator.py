"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Dict, List, Optional, Sequence
from pathlib import Path

from .config import GeneratorConfig
from .naming import IdentifierValidator
from .schema import Diagnostic, FieldStatus, MetaObject
from .templates import TemplateEngine, TemplateError, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'c')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.h')."""
        pass

    @property
    @abstractmethod
    def primitive_types(self) -> AbstractSet[str]:
        """Return the built-in type spellings of the target language."""
        pass

    @abstractmethod
    def create_validator(self) -> IdentifierValidator:
        """Return identifier rules for the target language."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def reference_type_name(self, object_name: str) -> str:
        """Spelling of the generated structure for a declared object."""
        return f"{object_name}{self.config.struct_suffix}"

    @abstractmethod
    def file_header(self) -> str:
        """
        Return the text written before the first object.

        Returns:
            Header text, including its trailing blank line
        """
        pass

    @abstractmethod
    def generate_single_object(self, obj: MetaObject) -> str:
        """
        Generate code for a single object.

        Args:
            obj: A finalized object

        Returns:
            Generated code for this object, including its trailing blank line
        """
        pass

    def generate(self, objects: Sequence[MetaObject]) -> str:
        """
        Generate code for all objects in order.

        Args:
            objects: Finalized objects in source order

        Returns:
            Generated code as a string
        """
        parts = [self.file_header()]
        parts.extend(self.generate_single_object(obj) for obj in objects)
        return "".join(parts)

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        return "\n".join(line.rstrip() for line in code.split("\n"))

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content

        Raises:
            GeneratorError: If the template is missing or fails to render
        """
        try:
            return self.template_engine.render_template(template_name, context)
        except TemplateError as e:
            raise GeneratorError(str(e)) from e


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        diagnostics: Optional[List[Diagnostic]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            diagnostics: Structured parse diagnostics behind the warnings
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.diagnostics = diagnostics or []
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __bool__(self) -> bool:
        return self.success


def build_metadata(
    generator: CodeGenerator, objects: Sequence[MetaObject]
) -> Dict[str, Any]:
    """Summarize a generation run."""
    validator = generator.create_validator()
    return {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "object_count": len(objects),
        "field_count": sum(obj.field_count for obj in objects),
        "invalid_field_count": sum(len(obj.invalid_fields) for obj in objects),
        "invalid_type_count": count_fields(objects, FieldStatus.INVALID_TYPE),
        "invalid_name_count": count_fields(objects, FieldStatus.INVALID_NAME),
        "disabled_object_count": sum(
            1 for obj in objects if not validator.is_valid_object_name(obj.name)
        ),
        "dropped_field_count": sum(obj.dropped_fields for obj in objects),
    }


def generate_code(
    generator: CodeGenerator,
    objects: Sequence[MetaObject],
    diagnostics: Optional[List[Diagnostic]] = None,
) -> GenerationResult:
    """
    Generate code for already-parsed objects.

    Args:
        generator: Code generator instance
        objects: Finalized objects in source order
        diagnostics: Parse diagnostics to attach to the result

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    diagnostics = list(diagnostics or [])
    code = generator.format_code(generator.generate(objects))
    return GenerationResult(
        code,
        warnings=[str(d) for d in diagnostics],
        metadata=build_metadata(generator, objects),
        diagnostics=diagnostics,
    )


def count_fields(objects: Sequence[MetaObject], status: FieldStatus) -> int:
    """Count fields with a given resolution outcome."""
    return sum(1 for obj in objects for f in obj.fields if f.status == status)
