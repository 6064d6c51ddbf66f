"""Create Q&A tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates qa_user, qa_question, qa_tag, qa_answer, qa_favorite and qa_vote.
How:   Question-owned rows reference qa_question through DEFERRABLE INITIALLY
       DEFERRED foreign keys without ON DELETE CASCADE: the service deletes the
       question first and removes dependents afterwards in the same transaction.

Rollback: downgrade() drops every table (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables, constraints and indexes. See qa/models/ for column docs."""
    op.create_table(
        "qa_user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(150), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "qa_question",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("qa_user.id"),
            nullable=False,
            comment="Author; stamped from the acting user at insert",
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column(
            "alias",
            sa.String(255),
            nullable=False,
            comment="URL slug derived from the title at insert",
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            sa.String(255),
            nullable=False,
            comment="Delimited, deduplicated tag names",
        ),
        sa.Column("answers", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("views", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("votes", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "status",
            sa.SmallInteger(),
            server_default=sa.text("1"),
            nullable=False,
            comment="0 = draft, 1 = published",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_qa_question_user_id", "qa_question", ["user_id"])
    op.create_index("idx_qa_question_alias", "qa_question", ["alias"])
    op.create_index(
        "idx_qa_question_created_at",
        "qa_question",
        [sa.text("created_at DESC")],
    )

    op.create_table(
        "qa_tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column(
            "frequency",
            sa.Integer(),
            server_default=sa.text("1"),
            nullable=False,
            comment="Number of questions using this tag",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "qa_answer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("qa_user.id"), nullable=False),
        sa.Column(
            "question_id",
            sa.Integer(),
            sa.ForeignKey("qa_question.id", deferrable=True, initially="DEFERRED"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("votes", sa.Integer(), server_default=sa.text("0"), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_qa_answer_question_id", "qa_answer", ["question_id"])

    op.create_table(
        "qa_favorite",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("qa_user.id"), nullable=False),
        sa.Column(
            "question_id",
            sa.Integer(),
            sa.ForeignKey("qa_question.id", deferrable=True, initially="DEFERRED"),
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "question_id", name="uq_qa_favorite_user_question"),
    )
    op.create_index("ix_qa_favorite_question_id", "qa_favorite", ["question_id"])

    op.create_table(
        "qa_vote",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("qa_user.id"), nullable=False),
        sa.Column("entity", sa.String(32), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=False),
        sa.Column("vote", sa.SmallInteger(), nullable=False, comment="+1 or -1"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_qa_vote_entity", "qa_vote", ["entity", "entity_id"])


def downgrade() -> None:
    """Drop every Q&A table, dependents first."""
    op.drop_index("idx_qa_vote_entity", table_name="qa_vote")
    op.drop_table("qa_vote")
    op.drop_index("ix_qa_favorite_question_id", table_name="qa_favorite")
    op.drop_table("qa_favorite")
    op.drop_index("ix_qa_answer_question_id", table_name="qa_answer")
    op.drop_table("qa_answer")
    op.drop_table("qa_tag")
    op.drop_index("idx_qa_question_created_at", table_name="qa_question")
    op.drop_index("idx_qa_question_alias", table_name="qa_question")
    op.drop_index("ix_qa_question_user_id", table_name="qa_question")
    op.drop_table("qa_question")
    op.drop_table("qa_user")
