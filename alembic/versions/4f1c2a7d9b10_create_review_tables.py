"""create review tables

Revision ID: 4f1c2a7d9b10
Revises:
Create Date: 2025-03-02 10:14:22.508113
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "4f1c2a7d9b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "groups",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("matric_number", sa.String(length=50), nullable=False),
        sa.Column("group_id", sa.Integer(), sa.ForeignKey("groups.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_students_matric_number", "students", ["matric_number"], unique=True)
    op.create_index("ix_students_group_id", "students", ["group_id"])

    op.create_table(
        "review_questions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("question_number", sa.Integer(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("max_score", sa.Integer(), nullable=False, server_default="5"),
    )

    op.create_table(
        "review_periods",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("period_name", sa.String(length=100), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("month", "year", name="uq_review_periods_month_year"),
        sa.CheckConstraint("month >= 1 AND month <= 12", name="ck_review_periods_month"),
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("reviewer_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("reviewed_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("review_period_id", sa.Integer(), sa.ForeignKey("review_periods.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question1_score", sa.Integer(), nullable=False),
        sa.Column("question2_score", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint(
            "reviewer_id", "reviewed_id", "review_period_id",
            name="uq_reviews_reviewer_reviewed_period",
        ),
        sa.CheckConstraint("question1_score >= 1 AND question1_score <= 5", name="ck_reviews_question1_score"),
        sa.CheckConstraint("question2_score >= 1 AND question2_score <= 5", name="ck_reviews_question2_score"),
    )
    op.create_index("ix_reviews_reviewed_id", "reviews", ["reviewed_id"])
    op.create_index("ix_reviews_review_period_id", "reviews", ["review_period_id"])

    op.create_table(
        "review_submissions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("review_period_id", sa.Integer(), sa.ForeignKey("review_periods.id", ondelete="CASCADE"), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("student_id", "review_period_id", name="uq_review_submissions_student_period"),
    )


def downgrade() -> None:
    op.drop_table("review_submissions")
    op.drop_index("ix_reviews_review_period_id", table_name="reviews")
    op.drop_index("ix_reviews_reviewed_id", table_name="reviews")
    op.drop_table("reviews")
    op.drop_table("review_periods")
    op.drop_table("review_questions")
    op.drop_index("ix_students_group_id", table_name="students")
    op.drop_index("ix_students_matric_number", table_name="students")
    op.drop_table("students")
    op.drop_table("groups")
