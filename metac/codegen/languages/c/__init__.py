"""
C code generator module.

Generates C ``typedef struct`` declarations from object schemas.
"""

from .generator import CGenerator, create_c_generator
from .naming import create_c_validator
from .types import C_PRIMITIVE_TYPES

__all__ = [
    "CGenerator",
    "create_c_generator",
    "create_c_validator",
    "C_PRIMITIVE_TYPES",
]
