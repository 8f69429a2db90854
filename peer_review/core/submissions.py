from sqlalchemy import func
from sqlalchemy.orm import Session

from peer_review.db.upsert import upsert
from peer_review.models.review_submission import ReviewSubmission


def has_submitted(db: Session, student_id: int, period_id: int) -> bool:
    row = (
        db.query(ReviewSubmission.id)
        .filter(
            ReviewSubmission.student_id == student_id,
            ReviewSubmission.review_period_id == period_id,
        )
        .first()
    )
    return row is not None


def record_submission(db: Session, student_id: int, period_id: int) -> None:
    """Mark the student's batch as submitted; a resubmission refreshes submitted_at."""
    upsert(
        db,
        ReviewSubmission,
        values={"student_id": student_id, "review_period_id": period_id},
        conflict_on=["student_id", "review_period_id"],
        update_columns=[],
        extra_set={"submitted_at": func.now()},
    )
