"""
Module: builder.sectioning

Purpose:
    Turn a raw question document into ordered sections.

Key Functions:
    - partition(): Split text into sections by "# " heading lines
"""

from .sectionizer import is_heading, iter_content_lines, partition

__all__ = [
    "is_heading",
    "iter_content_lines",
    "partition",
]
