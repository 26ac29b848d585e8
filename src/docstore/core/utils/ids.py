"""Unique identifier generation for stored documents"""

from typing import Callable
from uuid import uuid4


IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a random UUID4 string (36 chars, hyphenated)."""
    return str(uuid4())
