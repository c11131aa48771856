"""
Module: builder.output

Purpose:
    Write generated questions into Markdown notes.

Key Functions:
    - write_output(): Insert into an existing note or create a dated one
"""

from .writer import (
    OutputError,
    create_output_file,
    default_output_name,
    insert_text,
    write_output,
)

__all__ = [
    "OutputError",
    "create_output_file",
    "default_output_name",
    "insert_text",
    "write_output",
]
