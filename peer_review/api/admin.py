from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from peer_review.api.periods import to_out
from peer_review.core import periods
from peer_review.core.errors import store_errors
from peer_review.db.session import get_db
from peer_review.schemas.review_period import (
    ActivatePeriodRequest,
    MessageOut,
    ReviewPeriodCreate,
    ReviewPeriodEnvelope,
)

# NOTE: unauthenticated, like the rest of the portal. Keep behind a trusted network.
router = APIRouter(prefix="/admin/periods", tags=["admin"])


@router.post("", response_model=ReviewPeriodEnvelope, status_code=status.HTTP_201_CREATED)
def create_period(
    payload: ReviewPeriodCreate,
    db: Session = Depends(get_db),
):
    with store_errors("create period"):
        p = periods.create_period(db, month=payload.month, year=payload.year)
        db.commit()
        db.refresh(p)
    return ReviewPeriodEnvelope(period=to_out(p))


@router.post("/activate", response_model=ReviewPeriodEnvelope)
def activate_period(
    payload: ActivatePeriodRequest,
    db: Session = Depends(get_db),
):
    with store_errors("activate period"):
        p = periods.activate_period(db, payload.period_id)
        db.commit()
        db.refresh(p)
    return ReviewPeriodEnvelope(period=to_out(p))


@router.post("/deactivate", response_model=MessageOut)
def deactivate_periods(db: Session = Depends(get_db)):
    with store_errors("deactivate periods"):
        periods.deactivate_all(db)
        db.commit()
    return MessageOut(message="All periods deactivated")
