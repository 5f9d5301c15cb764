"""SQLAlchemy table definitions.

The schema is created idempotently at startup by ``create_schema``.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)

from tome.domain.value import CHARACTER_ID_MAX_LENGTH, NICKNAME_MAX_LENGTH

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("character_id", String(CHARACTER_ID_MAX_LENGTH), nullable=False),
    # Reply link; intentionally not a foreign key so dangling parents can be stored
    Column("parent_id", Integer, nullable=True),
    Column("nickname", String(NICKNAME_MAX_LENGTH), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    sqlite_autoincrement=True,
)

Index("idx_comments_character_id", comments_table.c.character_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
