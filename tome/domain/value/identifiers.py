"""Strongly typed identifiers for comment entities.

Using NewType keeps comment ids and character keys from being mixed up
and makes signatures self-documenting.
"""

from typing import NewType

# Store-assigned, monotonically increasing, never reused
CommentId = NewType("CommentId", int)

# External partition key; opaque to the store
CharacterId = NewType("CharacterId", str)
