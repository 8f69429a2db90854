from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.orm import Session

from peer_review.db.upsert import upsert
from peer_review.models.review import Review

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class ReviewScores:
    reviewed_id: int
    question1_score: int
    question2_score: int


def upsert_review(db: Session, *, reviewer_id: int, review_period_id: int, scores: ReviewScores) -> None:
    upsert(
        db,
        Review,
        values={
            "reviewer_id": reviewer_id,
            "reviewed_id": scores.reviewed_id,
            "review_period_id": review_period_id,
            "question1_score": scores.question1_score,
            "question2_score": scores.question2_score,
        },
        conflict_on=["reviewer_id", "reviewed_id", "review_period_id"],
        update_columns=["question1_score", "question2_score"],
        extra_set={"created_at": func.now()},
    )


def upsert_reviews(
    db: Session,
    *,
    reviewer_id: int,
    review_period_id: int,
    reviews: list[ReviewScores],
) -> int:
    # One statement per row, in order: a repeated key later in the batch wins.
    for scores in reviews:
        upsert_review(db, reviewer_id=reviewer_id, review_period_id=review_period_id, scores=scores)
    return len(reviews)
