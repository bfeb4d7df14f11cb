"""posts_insertion_sequence

Add an identity column recording insertion order on posts, used as the
secondary sort key of the newest-first listing.

Revision ID: 8d27e4b1f0a5
Revises: 3c1f9a72b4d0
Create Date: 2026-10-20 09:41:07.552913

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d27e4b1f0a5"
down_revision: Union[str, Sequence[str], None] = "3c1f9a72b4d0"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Existing rows are numbered by PostgreSQL when the column is added
    op.add_column(
        "posts",
        sa.Column("seq", sa.BigInteger(), sa.Identity(always=True), nullable=False),
    )
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.execute(
        "CREATE INDEX idx_posts_created_at_seq ON posts (created_at DESC, seq DESC)"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_created_at_seq", table_name="posts")
    op.execute("CREATE INDEX idx_posts_created_at ON posts (created_at DESC)")
    op.drop_column("posts", "seq")
