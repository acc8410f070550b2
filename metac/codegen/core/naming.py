"""
Identifier validation for generated code.

Judges whether schema names can be used as identifiers in a C-family
target language.
"""

from typing import FrozenSet, Iterable, Optional


# Characters that may never appear in a field name
FORBIDDEN_CHARACTERS = frozenset("!#@$%^&*()")


class IdentifierValidator:
    """Validates field and object names against a reserved type table."""

    def __init__(
        self,
        reserved_types: Iterable[str],
        forbidden_characters: Optional[Iterable[str]] = None,
    ):
        """
        Initialize validator.

        Args:
            reserved_types: Built-in type spellings that cannot be used as names
            forbidden_characters: Characters rejected anywhere in a field name
        """
        self.reserved_types: FrozenSet[str] = frozenset(reserved_types)
        self.forbidden_characters: FrozenSet[str] = (
            frozenset(forbidden_characters)
            if forbidden_characters is not None
            else FORBIDDEN_CHARACTERS
        )

    def has_forbidden_characters(self, name: str) -> bool:
        return any(ch in self.forbidden_characters for ch in name)

    def is_reserved(self, name: str) -> bool:
        """Check whether a name is exactly a reserved type spelling."""
        return name in self.reserved_types

    def follows_identifier_rules(self, name: str) -> bool:
        """Check the character rules: no forbidden characters, no leading digit."""
        if not name:
            return False
        if self.has_forbidden_characters(name):
            return False
        return not name[0].isdigit()

    def is_valid_field_name(self, name: str) -> bool:
        """
        Check whether a field name is usable as an identifier.

        A name is rejected when it contains a forbidden character, starts
        with a digit, or is itself a reserved type spelling.
        """
        return self.follows_identifier_rules(name) and not self.is_reserved(name)

    def is_valid_object_name(self, name: str) -> bool:
        """
        Check an object name at emission time.

        Only the reserved-type collision is checked here. Object names skip
        the character and leading-digit rules applied to field names; that
        inconsistency is known and kept so existing schemas emit unchanged.
        """
        return bool(name) and not self.is_reserved(name)
