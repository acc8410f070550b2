"""
Line-oriented schema parser.

Reads schema text one line at a time, tracks whether an object body is
open, resolves field types against the object registry and the primitive
type table, and yields each object once it is closed.

Schema syntax::

    obj :: Player {
        # comment
        health :: int
        target :: Enemy
    }
"""

import re
from enum import Enum
from typing import AbstractSet, Iterable, Iterator, List, Optional

from .config import GeneratorConfig
from .naming import IdentifierValidator
from .objects import ObjectRegistry
from .schema import Diagnostic, DiagnosticKind, Field, MetaObject
from ...logging_config import get_logger

logger = get_logger(__name__)

OBJECT_HEADER_PREFIX = "obj ::"
OBJECT_CLOSE = "}"
COMMENT_PREFIX = "#"

_HEADER_RE = re.compile(r"obj ::\s*([^\s{]+)")
_FIELD_RE = re.compile(r"(\S+)\s+::\s*(\S.*)")


class ParserState(Enum):
    """Where the parser is relative to object bodies."""

    OUTSIDE = "outside"
    IN_OBJECT = "in_object"


def parse_object_header(line: str) -> Optional[str]:
    """
    Extract the object name from a header line.

    Args:
        line: Line with leading whitespace already removed

    Returns:
        The object name, or None if the header has no name
    """
    match = _HEADER_RE.match(line)
    return match.group(1) if match else None


def split_field_line(line: str) -> Optional[tuple[str, str]]:
    """
    Split a ``name :: type`` line into its name and type.

    The type is the rest of the line with runs of whitespace collapsed,
    so multi-word spellings such as ``unsigned char`` stay whole.

    Returns:
        (name, type) or None if the line does not have that shape
    """
    match = _FIELD_RE.match(line)
    if not match:
        return None
    return match.group(1), " ".join(match.group(2).split())


class SchemaParser:
    """State machine turning schema lines into objects."""

    def __init__(
        self,
        registry: ObjectRegistry,
        validator: IdentifierValidator,
        primitive_types: AbstractSet[str],
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize parser.

        Args:
            registry: Registry that receives every opened object
            validator: Identifier rules for field names
            primitive_types: Built-in type spellings
            config: Generator configuration (suffix and limits)
        """
        self.registry = registry
        self.validator = validator
        self.primitive_types = primitive_types
        self.config = config or GeneratorConfig()

        self.state = ParserState.OUTSIDE
        self.current: Optional[MetaObject] = None
        self.diagnostics: List[Diagnostic] = []
        self.line_number = 0

    def parse_lines(self, lines: Iterable[str]) -> Iterator[MetaObject]:
        """
        Parse schema lines, yielding each object when it is closed.

        An object still open at end of input is yielded as well.
        """
        for raw_line in lines:
            self.line_number += 1
            finished = self.feed(raw_line)
            if finished is not None:
                yield finished

        finished = self.finish()
        if finished is not None:
            yield finished

    def parse_text(self, text: str) -> List[MetaObject]:
        """Parse a whole schema string and return the objects in order."""
        return list(self.parse_lines(text.splitlines()))

    def feed(self, raw_line: str) -> Optional[MetaObject]:
        """
        Process one line.

        Returns:
            The object closed by this line, if any
        """
        line = raw_line.lstrip()
        if not line:
            return None

        # A header line never doubles as a closing line
        if line.startswith(OBJECT_HEADER_PREFIX):
            finished = self._close_current()
            self._open_object(line)
            return finished

        if self.state is ParserState.IN_OBJECT:
            if OBJECT_CLOSE in line:
                return self._close_current()
            self.resolve_field(line)

        return None

    def finish(self) -> Optional[MetaObject]:
        """Close the object left open at end of input, if any."""
        return self._close_current()

    def _open_object(self, line: str):
        name = parse_object_header(line)
        if name is None:
            logger.debug("Ignoring object header without a name: %r", line.rstrip())
            return

        obj = MetaObject(
            name=name, max_fields=self.config.max_fields, line_number=self.line_number
        )
        if not self.registry.register(obj):
            self._report(
                DiagnosticKind.TOO_MANY_OBJECTS,
                f"Too many objects (limit {self.registry.max_objects}); "
                f"'{name}' cannot be referenced by later fields",
                object_name=name,
            )

        if not self.validator.follows_identifier_rules(name):
            # Object names only get the reserved-type check at emission
            logger.debug("Object name '%s' accepted as written", name)

        logger.debug("Opened object '%s' at line %d", name, self.line_number)
        self.current = obj
        self.state = ParserState.IN_OBJECT

    def _close_current(self) -> Optional[MetaObject]:
        finished = self.current
        if finished is not None:
            logger.debug(
                "Closed object '%s' with %d field(s)", finished.name, finished.field_count
            )
        self.current = None
        self.state = ParserState.OUTSIDE
        return finished

    def resolve_field(self, line: str) -> Optional[Field]:
        """
        Resolve a body line into a field of the current object.

        Comment and malformed lines are ignored without a diagnostic.

        Returns:
            The stored field, or None if nothing was stored
        """
        obj = self.current
        if obj is None or line.startswith(COMMENT_PREFIX):
            return None

        tokens = split_field_line(line)
        if tokens is None:
            return None
        name, type_token = tokens

        if not obj.add_field(self.resolve_type(name, type_token)):
            self._report(
                DiagnosticKind.TOO_MANY_FIELDS,
                f"Too many fields in '{obj.name}' (limit {obj.max_fields}); "
                f"dropping '{name}'",
                object_name=obj.name,
                field_name=name,
            )
            return None

        new_field = obj.fields[-1]
        if not new_field.type_valid:
            self._report(
                DiagnosticKind.UNRESOLVED_TYPE,
                f"Unresolved or invalid type '{type_token}' for field "
                f"'{obj.name}.{name}'",
                object_name=obj.name,
                field_name=name,
            )

        return new_field

    def resolve_type(self, name: str, type_token: str) -> Field:
        """
        Build a field, resolving its type.

        Declared objects are checked before primitive types. Objects
        declared later in the input are not visible yet, and objects
        named after a primitive are never emitted, so they do not shadow it.
        """
        name_valid = self.validator.is_valid_field_name(name)

        target = self.registry.find(type_token)
        if target is not None and self.validator.is_valid_object_name(target.name):
            return Field(
                name=name,
                declared_type=f"{type_token}{self.config.struct_suffix}",
                original_type=type_token,
                name_valid=name_valid,
                type_valid=True,
                is_reference=True,
            )

        return Field(
            name=name,
            declared_type=type_token,
            original_type=type_token,
            name_valid=name_valid,
            type_valid=type_token in self.primitive_types,
        )

    def _report(self, kind: DiagnosticKind, message: str, **context):
        diagnostic = Diagnostic(
            kind=kind, message=message, line_number=self.line_number, **context
        )
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)
