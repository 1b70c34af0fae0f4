"""Initial schema: users, study_sets, flashcards, quizzes, notes, study_progress.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

STUDY_CATEGORIES = (
    "biology",
    "computer_science",
    "history",
    "mathematics",
    "physics",
    "chemistry",
    "literature",
    "languages",
    "other",
)


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "study_sets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "category",
            sa.Enum(*STUDY_CATEGORIES, name="study_category", create_constraint=True),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_study_sets_id"), "study_sets", ["id"], unique=False)
    op.create_index(op.f("ix_study_sets_user_id"), "study_sets", ["user_id"], unique=False)

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("study_set_id", sa.Integer(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("times_reviewed", sa.Integer(), server_default="0", nullable=False),
        sa.Column("times_correct", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint("times_reviewed >= 0", name="ck_flashcards_times_reviewed_non_negative"),
        sa.CheckConstraint("times_correct >= 0", name="ck_flashcards_times_correct_non_negative"),
        sa.CheckConstraint(
            "times_correct <= times_reviewed", name="ck_flashcards_correct_within_reviewed"
        ),
        sa.ForeignKeyConstraint(["study_set_id"], ["study_sets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_id"), "flashcards", ["id"], unique=False)
    op.create_index(
        op.f("ix_flashcards_study_set_id"), "flashcards", ["study_set_id"], unique=False
    )

    for table in ("quizzes", "notes"):
        columns = [
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("study_set_id", sa.Integer(), nullable=False),
            sa.Column("title", sa.String(255), nullable=False),
        ]
        if table == "notes":
            columns.append(sa.Column("content", sa.Text(), nullable=False))
        op.create_table(
            table,
            *columns,
            sa.Column(
                "created_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("(CURRENT_TIMESTAMP)"),
                nullable=False,
            ),
            sa.ForeignKeyConstraint(["study_set_id"], ["study_sets.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f(f"ix_{table}_id"), table, ["id"], unique=False)
        op.create_index(op.f(f"ix_{table}_study_set_id"), table, ["study_set_id"], unique=False)

    op.create_table(
        "study_progress",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("study_set_id", sa.Integer(), nullable=False),
        sa.Column(
            "last_studied_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["study_set_id"], ["study_sets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_study_progress_id"), "study_progress", ["id"], unique=False)
    op.create_index(
        op.f("ix_study_progress_user_id"), "study_progress", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_study_progress_study_set_id"), "study_progress", ["study_set_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables, children first."""
    for table in ("study_progress", "notes", "quizzes", "flashcards", "study_sets", "users"):
        op.drop_table(table)
    sa.Enum(name="study_category").drop(op.get_bind(), checkfirst=True)
