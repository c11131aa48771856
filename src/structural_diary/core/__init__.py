"""Core data models for the structural diary."""

from .models import Section

__all__ = ["Section"]
