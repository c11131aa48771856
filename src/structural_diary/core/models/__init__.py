"""
Core Models Package

Immutable data models shared by the sectionizer and the sampler.

All models in this package are frozen dataclasses, so a parsed document
can be sampled any number of times without one run affecting the next.
"""

from .sections import HEADER_MARKER, Section, heading_label

__all__ = [
    "HEADER_MARKER",
    "Section",
    "heading_label",
]
