"""create users, notes and shares

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:04.118230

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from fesnotes.core.models.types import GUID

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", GUID(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint(
            "length(username) >= 3 AND length(username) <= 50", name="ck_users_username_len"
        ),
        sa.CheckConstraint("length(email) <= 100", name="ck_users_email_len"),
    )
    op.create_index("idx_users_email", "users", ["email"])
    op.create_index(
        "uq_users_username_lower", "users", [sa.text("lower(username)")], unique=True
    )
    op.create_index("uq_users_email_lower", "users", [sa.text("lower(email)")], unique=True)

    op.create_table(
        "notes",
        sa.Column("id", GUID(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("color", sa.String(length=20), nullable=False, server_default="yellow"),
        sa.Column(
            "owner_id", GUID(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("length(title) > 0", name="ck_notes_title_nonempty"),
        sa.CheckConstraint("length(content) > 0", name="ck_notes_content_nonempty"),
    )
    op.create_index("idx_notes_owner_id", "notes", ["owner_id"])
    op.create_index("idx_notes_owner_created", "notes", ["owner_id", "created_at"])

    op.create_table(
        "shares",
        sa.Column("id", GUID(), primary_key=True),
        sa.Column(
            "note_id", GUID(), sa.ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "owner_id", GUID(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "grantee_id", GUID(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("permission", sa.String(length=10), nullable=False, server_default="read"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("note_id", "grantee_id", name="uq_shares_note_grantee"),
        sa.CheckConstraint("owner_id <> grantee_id", name="ck_shares_not_self"),
        sa.CheckConstraint("permission IN ('read', 'edit')", name="ck_shares_permission"),
    )
    op.create_index("idx_shares_note_id", "shares", ["note_id"])
    op.create_index("idx_shares_grantee_id", "shares", ["grantee_id"])
    op.create_index("idx_shares_owner_id", "shares", ["owner_id"])


def downgrade() -> None:
    op.drop_index("idx_shares_owner_id", table_name="shares")
    op.drop_index("idx_shares_grantee_id", table_name="shares")
    op.drop_index("idx_shares_note_id", table_name="shares")
    op.drop_table("shares")

    op.drop_index("idx_notes_owner_created", table_name="notes")
    op.drop_index("idx_notes_owner_id", table_name="notes")
    op.drop_table("notes")

    op.drop_index("uq_users_email_lower", table_name="users")
    op.drop_index("uq_users_username_lower", table_name="users")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
