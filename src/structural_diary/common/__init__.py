"""Shared resources: the built-in question document and its loader."""

from .default_questions import DEFAULT_QUESTIONS, load_question_source

__all__ = ["DEFAULT_QUESTIONS", "load_question_source"]
