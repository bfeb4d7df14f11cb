"""Table definitions shared by the repositories and alembic."""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()


def _timestamp(name: str) -> Column:
    return Column(
        name, TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )


users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    # werkzeug "scrypt:..." / "pbkdf2:..." hash string
    Column("password_hash", String(255), nullable=False),
    _timestamp("created_at"),
)

posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("summary", Text, nullable=False),
    Column("content", Text, nullable=False),
    # Public path under the uploads mount, e.g. "uploads/<name>.png"
    Column("cover", Text, nullable=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    # Insertion order; breaks ties between equal created_at values
    Column("seq", BigInteger, Identity(always=True), nullable=False),
)

Index(
    "idx_posts_created_at_seq",
    posts_table.c.created_at.desc(),
    posts_table.c.seq.desc(),
)
Index("idx_posts_author_id", posts_table.c.author_id)
