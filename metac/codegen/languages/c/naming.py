"""
C-specific identifier validation.
"""

from ...core.naming import IdentifierValidator
from .types import C_PRIMITIVE_TYPES


def create_c_validator() -> IdentifierValidator:
    """Create an identifier validator configured for C."""
    return IdentifierValidator(C_PRIMITIVE_TYPES)
