from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from peer_review.core import periods
from peer_review.core.errors import store_errors
from peer_review.db.session import get_db
from peer_review.models.review_period import ReviewPeriod
from peer_review.schemas.review_period import ReviewPeriodOut

router = APIRouter(prefix="/periods", tags=["review-periods"])


def to_out(p: ReviewPeriod) -> ReviewPeriodOut:
    return ReviewPeriodOut(
        id=p.id,
        period_name=p.period_name,
        month=p.month,
        year=p.year,
        is_active=p.is_active,
    )


@router.get("", response_model=list[ReviewPeriodOut])
def list_periods(db: Session = Depends(get_db)):
    """
    All review periods, newest first (year desc, month desc).
    """
    with store_errors("fetch periods"):
        return [to_out(p) for p in periods.list_periods(db)]


@router.get("/active", response_model=ReviewPeriodOut)
def get_active_period(db: Session = Depends(get_db)):
    """404 when no review window is open."""
    with store_errors("fetch active period"):
        return to_out(periods.get_active_period(db))
