"""
Module: common.default_questions

Purpose:
    Built-in question document used when no questions file is configured
    or the configured file cannot be read.

Key Functions:
    - load_question_source(): File text or the built-in document
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS = """\
# Remembering important events

What important things happened  today?

What places did I visit?

With whom did I meet/speak?

What was the topic of conversations?

What did I purchase?

What important did I do, start to do, accomplished?

# Introspection (To sum up every project/day/week/month/year)

What was successful or unsuccessful?

Why?

What could be done in more simple, easy and efficient way?

What things weren't accomplished?

What did hinder me?

# Rationality

Did I think thoroughly before speak/act? Did I weight consequences?

What were wrong or irrational in my actions, words, thoughts?

What would be the better way?

What was the reason for my misstep?

What should I do in order to not repeat my mistake?

# Patterns

What are my most common failures?

What virtues were forgotten?

What responsibilities are neglected?

# Time-managment

Did I spend time efficiently?

What was time wasting?

How can I optimise my day?

What resources do I have?

Am I using them effectively?

Did I procrastinate?

# Future

Are there potential areas of crisis in my life?

What am I doing to prepare?

Is there opportunities for future development?

# Emotions

Did I keep peaceful spirit (Inner peace)?

What is the most frequent topic of my thoughts?

What thoughts are troubling me?

What is the source of bad feelings?

Are there any fearful, worrisome, upsetting things?

Do I feel guilty, angry, offended, unsure?

Why do I feel this way?

What was the source of joy and pleasure for me recently?

Why?

# Intuition

Do I have the feeling that something is wrong?

Do I have the feeling that I missed something?

Did I have an impulse to do something?

What are opportunities for me in these circumstances to serve God and neighbors?

Did I saw in a dream something meaningful?

# Self-actualization

What are my priorities for this period of life?

What are my values?

What are my dreams?

What is my weakest point in character, knowledge, skills, habits?

What is my strongest point?

What makes me happy and gratified?

# Intellectual life

All ideas, aha reactions, eurekas, observations go here.

What books/articles have I started to read or have finished to read?

What texts am I working on?

What have l finished?

In what conferences and meetings did I participate?

What movies have I watched?

What new information have I discovered from books or conversations?

What information needs to be checked?

What topics do I need to consider more carefully and in depth?

What facts are against my point of view?

Is there reasonable doubt?

# Social life

Did I practice mindful listening?

What new information have I found out about my acquaintance and friends?

What are their dreams, problems, virtues, prayer needs?

How can I participate in their life?

Was I thankful?

# Prayers

What are my confessions to God?

gratitudes to God?

asking to God?

What answers have I received?
"""


def load_question_source(path: Optional[Path | str]) -> str:
    """
    Read the question document at ``path``.

    Falls back to DEFAULT_QUESTIONS when no path is configured, the path
    is not a file, or it cannot be decoded. A UTF-8 byte order mark is
    dropped so it never reaches the first heading.

    Args:
        path: Questions file (Markdown or plain text), or None

    Returns:
        Document text
    """
    if not path:
        logger.info("No questions file configured, using built-in questions")
        return DEFAULT_QUESTIONS

    source = Path(path).expanduser()
    if not source.is_file():
        logger.warning(f"Questions file not found: {source}. Using built-in questions")
        return DEFAULT_QUESTIONS

    try:
        return source.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read questions file {source}: {e}. Using built-in questions")
        return DEFAULT_QUESTIONS
