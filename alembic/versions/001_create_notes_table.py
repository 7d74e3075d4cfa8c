"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2016-03-01 00:00:00.000000+00:00

What:  Creates the `notes` table: autoincrement id, title, body.
How:   Portable column types; BIGINT ids become INTEGER on SQLite so that
       SQLite's rowid autoincrement applies.

Rollback: downgrade() drops the table entirely (destructive, all notes lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table. Column docs live in deciservice/models/note.py."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
            comment="Unique identifier assigned on insert",
        ),
        sa.Column(
            "title",
            sa.String(1024),
            nullable=False,
            server_default=sa.text("''"),
            comment="Single-line note title",
        ),
        sa.Column(
            "body",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
            comment="Note body",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the notes table. Destructive: every stored note is lost."""
    op.drop_table("notes")
