from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from peer_review.db.base import Base


class ReviewSubmission(Base):
    __tablename__ = "review_submissions"
    __table_args__ = (
        UniqueConstraint("student_id", "review_period_id", name="uq_review_submissions_student_period"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    student_id: Mapped[int] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    review_period_id: Mapped[int] = mapped_column(
        ForeignKey("review_periods.id", ondelete="CASCADE"), nullable=False
    )

    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
