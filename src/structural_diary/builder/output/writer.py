"""
Module: builder.output.writer

Purpose:
    Put generated questions into a Markdown note: either insert them
    into an existing note or create a new dated one.

Key Functions:
    - write_output(): Main entry point (insert or create)
    - insert_text(): Insert text into an existing note at an offset
    - create_output_file(): Create "RandomDiaryQuestions by D-M-YYYY.md"
    - default_output_name(): Dated file name for new notes

Dependencies:
    - pathlib (std)

Used By:
    - builder.controller: write_result()
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = "md"
OUTPUT_PREFIX = "RandomDiaryQuestions by"


class OutputError(Exception):
    """Error writing a generated note."""
    pass


def default_output_name(today: Optional[date] = None) -> str:
    """
    File name for a new note.

    Example:
        >>> default_output_name(date(2024, 3, 7))
        'RandomDiaryQuestions by 7-3-2024.md'
    """
    today = today or date.today()
    return f"{OUTPUT_PREFIX} {today.day}-{today.month}-{today.year}.{MARKDOWN_EXTENSION}"


def is_markdown(path: Path) -> bool:
    return path.suffix.lower() == f".{MARKDOWN_EXTENSION}"


def _atomic_write(path: Path, text: str) -> None:
    """Write via a temp file so an interrupted write never truncates a note."""
    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        temp_path.replace(path)
    except OSError as e:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise OutputError(f"Cannot write {path}: {e}") from e


def insert_text(target: Path, text: str, position: Optional[int] = None) -> Path:
    """
    Insert ``text`` into an existing note.

    Args:
        target: Existing Markdown file
        text: Text to insert
        position: Character offset (clamped to the file length),
                  end of file when None

    Returns:
        Path of the updated note

    Raises:
        OutputError: If the note cannot be read or written
    """
    try:
        with target.open(encoding="utf-8", newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise OutputError(f"Cannot read {target}: {e}") from e

    offset = len(content) if position is None else max(0, min(position, len(content)))
    _atomic_write(target, content[:offset] + text + content[offset:])
    logger.debug(f"Inserted {len(text)} characters into {target} at offset {offset}")
    return target


def create_output_file(directory: Path, text: str, today: Optional[date] = None) -> Path:
    """
    Create a new dated note in ``directory``.

    An existing note with the same name is never overwritten; a
    " (n)" suffix is added instead.

    Raises:
        OutputError: If the note cannot be written
    """
    name = default_output_name(today)
    path = directory / name
    counter = 1
    while path.exists():
        path = directory / f"{Path(name).stem} ({counter}).{MARKDOWN_EXTENSION}"
        counter += 1

    _atomic_write(path, text)
    logger.debug(f"Created {path}")
    return path


def write_output(
    text: str,
    target: Optional[Path] = None,
    directory: Optional[Path] = None,
    today: Optional[date] = None,
) -> Path:
    """
    Insert into ``target`` or create a new note.

    Text is inserted when ``target`` is an existing Markdown file.
    Anything else (no target, missing file, non-Markdown file) creates
    a new dated note in ``directory``, defaulting to the current
    working directory.

    Returns:
        Path of the note that received the text
    """
    if target is not None:
        target = Path(target).expanduser()
        if target.is_file() and is_markdown(target):
            return insert_text(target, text)
        logger.info(f"{target} is not an existing Markdown note, creating a new one")

    return create_output_file(Path(directory or Path.cwd()), text, today)
