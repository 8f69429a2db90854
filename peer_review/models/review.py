from datetime import datetime

from sqlalchemy import Integer, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from peer_review.db.base import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        # Upsert target: one row per reviewer/reviewed/period
        UniqueConstraint(
            "reviewer_id", "reviewed_id", "review_period_id",
            name="uq_reviews_reviewer_reviewed_period",
        ),
        CheckConstraint(
            "question1_score >= 1 AND question1_score <= 5",
            name="ck_reviews_question1_score",
        ),
        CheckConstraint(
            "question2_score >= 1 AND question2_score <= 5",
            name="ck_reviews_question2_score",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    reviewer_id: Mapped[int] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    reviewed_id: Mapped[int] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), index=True, nullable=False
    )
    review_period_id: Mapped[int] = mapped_column(
        ForeignKey("review_periods.id", ondelete="CASCADE"), index=True, nullable=False
    )

    question1_score: Mapped[int] = mapped_column(Integer, nullable=False)
    question2_score: Mapped[int] = mapped_column(Integer, nullable=False)

    # Refreshed on every overwrite
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
