"""
C primitive type table.

Every scalar type spelling the generator accepts without resolving it
against a declared object.
"""

from typing import FrozenSet


_CHAR_TYPES = {
    "char",
    "signed char",
    "unsigned char",
}

_INTEGER_TYPES = {
    "short",
    "short int",
    "signed short",
    "signed short int",
    "unsigned short",
    "unsigned short int",
    "int",
    "signed",
    "signed int",
    "unsigned",
    "unsigned int",
    "long",
    "long int",
    "signed long",
    "signed long int",
    "unsigned long",
    "unsigned long int",
    "long long",
    "long long int",
    "signed long long",
    "signed long long int",
    "unsigned long long",
    "unsigned long long int",
}

_FIXED_WIDTH_TYPES = {
    "int8_t",
    "int16_t",
    "int32_t",
    "int64_t",
    "uint8_t",
    "uint16_t",
    "uint32_t",
    "uint64_t",
}

_FLOAT_TYPES = {
    "float",
    "double",
    "long double",
}

_MISC_TYPES = {
    "bool",
    "_Bool",
    "size_t",
}

C_PRIMITIVE_TYPES: FrozenSet[str] = frozenset(
    _CHAR_TYPES | _INTEGER_TYPES | _FIXED_WIDTH_TYPES | _FLOAT_TYPES | _MISC_TYPES
)
