from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from peer_review.core import admission
from peer_review.core.errors import store_errors
from peer_review.core.reviews import ReviewScores
from peer_review.db.session import get_db
from peer_review.schemas.review import SubmitReviewsOut, SubmitReviewsRequest

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/submit", response_model=SubmitReviewsOut)
def submit_reviews(
    payload: SubmitReviewsRequest,
    db: Session = Depends(get_db),
):
    batch = [
        ReviewScores(
            reviewed_id=r.reviewed_id,
            question1_score=r.question1_score,
            question2_score=r.question2_score,
        )
        for r in payload.reviews
    ]

    with store_errors("submit reviews"):
        count = admission.submit_batch(
            db,
            reviewer_id=payload.reviewer_id,
            review_period_id=payload.review_period_id,
            batch=batch,
        )
        db.commit()
    return SubmitReviewsOut(count=count)
