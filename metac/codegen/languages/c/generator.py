"""
C code generator implementation.

Emits one ``typedef struct`` per schema object. Problems are written as
comments next to the offending construct so the header always compiles.
"""

from pathlib import Path
from typing import AbstractSet, Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import IdentifierValidator
from ...core.schema import Field, MetaObject, ObjectStatus
from ....logging_config import get_logger
from .naming import create_c_validator
from .types import C_PRIMITIVE_TYPES

logger = get_logger(__name__)


class CGenerator(CodeGenerator):
    """Code generator for C struct declarations."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C generator with configuration."""
        super().__init__(config)
        self.validator = create_c_validator()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "c"

    @property
    def file_extension(self) -> str:
        """Return C header file extension."""
        return ".h"

    @property
    def primitive_types(self) -> AbstractSet[str]:
        return C_PRIMITIVE_TYPES

    def create_validator(self) -> IdentifierValidator:
        return create_c_validator()

    def get_template_directory(self) -> Optional[Path]:
        """Return the C templates directory."""
        return Path(__file__).parent / "templates"

    def object_status(self, obj: MetaObject) -> ObjectStatus:
        """Decide whether an object can be emitted as a live declaration."""
        if self.validator.is_valid_object_name(obj.name):
            return ObjectStatus.VALID
        return ObjectStatus.INVALID_OBJECT_NAME

    def file_header(self) -> str:
        """Render the auto-generated banner followed by a blank line."""
        context = {"header_comment": self.config.header_comment}
        return self.render_template("file_header.c.j2", context) + "\n\n"

    def generate_single_object(self, obj: MetaObject) -> str:
        """Generate the struct declaration for one object."""
        struct_name = self.reference_type_name(obj.name)

        if self.object_status(obj) is ObjectStatus.INVALID_OBJECT_NAME:
            logger.info(
                "Object '%s' conflicts with a built-in type; emitting it disabled",
                obj.name,
            )
            context = {"object_name": obj.name, "struct_name": struct_name}
            return self.render_template("disabled_struct.c.j2", context) + "\n\n"

        context = {
            "struct_name": struct_name,
            "indent": self.config.indent,
            "fields": [self._field_data(f) for f in obj.fields],
        }
        return self.render_template("struct.c.j2", context) + "\n\n"

    def _field_data(self, field: Field) -> Dict[str, Any]:
        """Template context for one member line."""
        return {
            "name": field.name,
            "type": field.declared_type,
            "original_type": field.original_type,
            "status": field.status.value,
        }


def create_c_generator(config: Optional[Dict[str, Any]] = None) -> CGenerator:
    """Create a C generator, applying overrides on top of the defaults."""
    return CGenerator(load_config("c", custom_config=config))
