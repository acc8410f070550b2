"""
Core schema representation for code generation.

Holds the object/field model built by the line parser and the tagged
outcomes the emitter consumes.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class FieldStatus(Enum):
    """Resolution outcome of a single field."""

    VALID = "valid"
    INVALID_NAME = "invalid_name"
    INVALID_TYPE = "invalid_type"


class ObjectStatus(Enum):
    """Resolution outcome of an object as a whole."""

    VALID = "valid"
    INVALID_OBJECT_NAME = "invalid_object_name"


class DiagnosticKind(Enum):
    """Conditions reported through the logging side-channel."""

    UNRESOLVED_TYPE = "unresolved_type"
    TOO_MANY_FIELDS = "too_many_fields"
    TOO_MANY_OBJECTS = "too_many_objects"


@dataclass(frozen=True)
class Field:
    """A single ``name :: type`` member of an object."""

    name: str
    declared_type: str  # Resolved output spelling (primitive or reference)
    original_type: str  # Type token exactly as written in the schema
    name_valid: bool
    type_valid: bool
    is_reference: bool = False

    @property
    def status(self) -> FieldStatus:
        """Tagged outcome; an invalid type wins over an invalid name."""
        if not self.type_valid:
            return FieldStatus.INVALID_TYPE
        if not self.name_valid:
            return FieldStatus.INVALID_NAME
        return FieldStatus.VALID


@dataclass
class MetaObject:
    """A named schema object and its fields in source order."""

    name: str
    fields: List[Field] = field(default_factory=list)
    max_fields: Optional[int] = None
    line_number: int = 0
    dropped_fields: int = 0

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def is_full(self) -> bool:
        return self.max_fields is not None and len(self.fields) >= self.max_fields

    def add_field(self, new_field: Field) -> bool:
        """
        Append a field unless the object is at capacity.

        Returns:
            True if the field was stored, False if it was dropped
        """
        if self.is_full:
            self.dropped_fields += 1
            return False
        self.fields.append(new_field)
        return True

    @property
    def invalid_fields(self) -> List[Field]:
        return [f for f in self.fields if f.status != FieldStatus.VALID]


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while parsing."""

    kind: DiagnosticKind
    message: str
    line_number: int = 0
    object_name: Optional[str] = None
    field_name: Optional[str] = None

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message}"
        return self.message
