from datetime import datetime

from sqlalchemy import String, Integer, Boolean, DateTime, CheckConstraint, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from peer_review.db.base import Base


class ReviewPeriod(Base):
    __tablename__ = "review_periods"
    __table_args__ = (
        UniqueConstraint("month", "year", name="uq_review_periods_month_year"),
        CheckConstraint("month >= 1 AND month <= 12", name="ck_review_periods_month"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    period_name: Mapped[str] = mapped_column(String(100), nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    # At most one row is active. Kept by core.periods.activate_period, not by a constraint.
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
