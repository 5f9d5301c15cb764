"""Input validation for untrusted request values.

Everything that reaches the comment store goes through here first: ids are
checked against a digits-only pattern, nickname and content are trimmed and
length-checked.
"""

import re
from typing import Any

from tome.domain.value import (
    CHARACTER_ID_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    NICKNAME_MAX_LENGTH,
)
from tome.interface.error import ValidationError

# ASCII digits only; str.isdigit() and \d also accept other scripts
_NUMERIC_ID = re.compile(r"[0-9]+")

# Largest id a 64-bit integer column can hold
_MAX_COMMENT_ID = 2**63 - 1


def validate_character_id(value: Any) -> str:
    """Return the character id as a string of digits.

    Raises:
        ValidationError: If the value is missing or not a plain number
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError("Invalid character ID")
    text = str(value)
    if len(text) > CHARACTER_ID_MAX_LENGTH or not _NUMERIC_ID.fullmatch(text):
        raise ValidationError("Invalid character ID")
    return text


def validate_comment_id(value: Any) -> int:
    """Return a comment id taken from a URL path.

    Raises:
        ValidationError: If the value is not a plain number
    """
    text = str(value) if value is not None else ""
    if not _NUMERIC_ID.fullmatch(text) or int(text) > _MAX_COMMENT_ID:
        raise ValidationError("Invalid comment ID")
    return int(text)


def validate_parent_id(value: Any) -> int | None:
    """Return the parent id for a reply, or None for a top-level comment.

    Empty values ("", 0, null) mean top-level. The id is not checked for
    existence.

    Raises:
        ValidationError: If the value is present but not a plain number
    """
    if value is None or value == "" or value == 0:
        return None
    if isinstance(value, bool):
        raise ValidationError("Invalid parent ID")
    if isinstance(value, int):
        if value < 0 or value > _MAX_COMMENT_ID:
            raise ValidationError("Invalid parent ID")
        return value
    text = str(value)
    if not _NUMERIC_ID.fullmatch(text) or int(text) > _MAX_COMMENT_ID:
        raise ValidationError("Invalid parent ID")
    return int(text) or None


def normalize_nickname(value: Any) -> str:
    """Trim and length-check a nickname.

    Raises:
        ValidationError: If empty after trimming or too long
    """
    nickname = value.strip() if isinstance(value, str) else ""
    if not nickname:
        raise ValidationError("Nickname is required")
    if len(nickname) > NICKNAME_MAX_LENGTH:
        raise ValidationError(
            f"Nickname must be {NICKNAME_MAX_LENGTH} characters or less"
        )
    return nickname


def normalize_content(value: Any) -> str:
    """Trim and length-check comment content.

    Raises:
        ValidationError: If empty after trimming or too long
    """
    content = value.strip() if isinstance(value, str) else ""
    if not content:
        raise ValidationError("Comment content is required")
    if len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment must be {CONTENT_MAX_LENGTH} characters or less"
        )
    return content
