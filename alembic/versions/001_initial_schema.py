"""Initial schema - workspace roster, scope overrides, tasks and dependencies.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_SCOPE_MEMBER_TABLES = ("space_member", "folder_member", "list_member", "table_member")


def upgrade() -> None:
    op.create_table(
        "workspace",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "workspace_member",
        sa.Column("workspace_id", sa.String(64), sa.ForeignKey("workspace.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.String(64), primary_key=True),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "space_roster",
        sa.Column("space_id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), primary_key=True),
        sa.Column("workspace_id", sa.String(64), sa.ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False),
    )

    for table in _SCOPE_MEMBER_TABLES:
        op.create_table(
            table,
            sa.Column("id", sa.UUID(), primary_key=True),
            sa.Column("scope_id", sa.String(64), nullable=False),
            sa.Column("user_id", sa.String(64), nullable=False),
            sa.Column("workspace_id", sa.String(64), sa.ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False),
            sa.Column("permission_level", sa.String(20), nullable=False),
            sa.Column("added_by", sa.String(64), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index(
            f"ix_{table}_workspace_scope_user", table, ["workspace_id", "scope_id", "user_id"], unique=True
        )

    op.create_table(
        "task",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("workspace_id", sa.String(64), sa.ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False),
        sa.Column("space_id", sa.String(64), nullable=False),
        sa.Column("folder_id", sa.String(64), nullable=True),
        sa.Column("list_id", sa.String(64), nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="todo"),
        sa.Column("assignee_id", sa.String(64), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_milestone", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_task_workspace_id", "task", ["workspace_id"])

    op.create_table(
        "task_dependency",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("task_id", sa.String(64), sa.ForeignKey("task.id", ondelete="CASCADE"), nullable=False),
        sa.Column("depends_on_id", sa.String(64), sa.ForeignKey("task.id", ondelete="CASCADE"), nullable=False),
        sa.Column("workspace_id", sa.String(64), sa.ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(2), nullable=False, server_default="FS"),
        sa.Column("created_by", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("task_id <> depends_on_id", name="ck_task_dependency_not_self"),
    )
    op.create_index(
        "ix_task_dependency_task_depends_on", "task_dependency", ["task_id", "depends_on_id"], unique=True
    )
    op.create_index("ix_task_dependency_depends_on_id", "task_dependency", ["depends_on_id"])


def downgrade() -> None:
    op.drop_table("task_dependency")
    op.drop_table("task")
    for table in reversed(_SCOPE_MEMBER_TABLES):
        op.drop_table(table)
    op.drop_table("space_roster")
    op.drop_table("workspace_member")
    op.drop_table("workspace")
