"""
Derived text fields for blog posts.
"""

import math
import re
from typing import Iterable, List

MARKUP_PATTERN = re.compile(r"<[^>]*>")

EXCERPT_LENGTH = 150
WORDS_PER_MINUTE = 200


def strip_markup(text: str) -> str:
    """Remove HTML-like tags."""
    return MARKUP_PATTERN.sub("", text)


def make_excerpt(content: str) -> str:
    """First 150 characters of the tag-stripped content, with an ellipsis when cut."""
    plain = strip_markup(content)
    if len(plain) > EXCERPT_LENGTH:
        return plain[:EXCERPT_LENGTH] + "..."
    return plain


def word_count(content: str) -> int:
    return len(content.split())


def compute_read_time(content: str) -> int:
    """Reading time in whole minutes at 200 words per minute, rounded up."""
    return math.ceil(word_count(content) / WORDS_PER_MINUTE)


def normalize_tags(tags: Iterable[str]) -> List[str]:
    """Trim and lowercase tags, keeping their order."""
    return [tag.strip().lower() for tag in tags]
