"""Helpers shared by test modules."""

import textwrap


HEADER = "/* Auto-generated code - do not edit! */\n\n"


def schema(text: str) -> str:
    """Dedent an inline schema and drop the leading newline."""
    return textwrap.dedent(text).lstrip("\n")
