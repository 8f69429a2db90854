"""
Login and batch-submission admission rules.

login: exact matric lookup, then the active period, then the ledger.
submit_batch: validate the whole batch, then write reviews and the ledger
entry in the request transaction.
"""
from dataclasses import dataclass

from sqlalchemy.orm import Session

from peer_review.core import periods, reviews as review_store, submissions
from peer_review.core.directory import get_student_by_matric
from peer_review.core.errors import NoActivePeriodError, NotFoundError, ValidationError
from peer_review.core.logging import get_logger
from peer_review.core.reviews import MAX_SCORE, MIN_SCORE, ReviewScores
from peer_review.models.review_period import ReviewPeriod
from peer_review.models.student import Student

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    student: Student
    period: ReviewPeriod
    already_submitted: bool


def login(db: Session, matric_number: str | None) -> LoginResult:
    if not matric_number or not matric_number.strip():
        raise ValidationError("Matric number is required")

    student = get_student_by_matric(db, matric_number)
    if not student:
        # Same answer whether the identifier is malformed or simply unknown
        logger.warning("Login rejected for unknown matric number")
        raise NotFoundError("Invalid matric number. Please check and try again.")

    try:
        period = periods.get_active_period(db)
    except NotFoundError:
        raise NoActivePeriodError() from None

    return LoginResult(
        student=student,
        period=period,
        already_submitted=submissions.has_submitted(db, student.id, period.id),
    )


def _score_in_range(score) -> bool:
    return isinstance(score, int) and not isinstance(score, bool) and MIN_SCORE <= score <= MAX_SCORE


def validate_batch(reviewer_id: int | None, review_period_id: int | None, batch: list[ReviewScores]) -> None:
    """Shape checks for the whole batch; runs before anything touches the store."""
    if not reviewer_id or not review_period_id or not batch:
        raise ValidationError("Invalid submission data")

    for item in batch:
        if not item.reviewed_id:
            raise ValidationError("Invalid submission data")
        if not (_score_in_range(item.question1_score) and _score_in_range(item.question2_score)):
            raise ValidationError(f"Scores must be between {MIN_SCORE} and {MAX_SCORE}")
        if item.reviewed_id == reviewer_id:
            raise ValidationError("You cannot review yourself")


def submit_batch(
    db: Session,
    *,
    reviewer_id: int | None,
    review_period_id: int | None,
    batch: list[ReviewScores],
) -> int:
    validate_batch(reviewer_id, review_period_id, batch)

    reviewer = db.get(Student, reviewer_id)
    if not reviewer:
        raise NotFoundError("Reviewer not found")

    period = periods.get_period(db, review_period_id)
    if not period.is_active:
        logger.warning(
            "Rejected submission from student %s for inactive period %s", reviewer.id, period.id
        )
        raise NoActivePeriodError("This review period is not open for submissions")

    reviewed_ids = {item.reviewed_id for item in batch}
    peers = {
        s.id
        for s in db.query(Student.id)
        .filter(Student.id.in_(reviewed_ids), Student.group_id == reviewer.group_id)
        .all()
    }
    if reviewed_ids - peers:
        raise ValidationError("Reviews can only be submitted for members of your group")

    count = review_store.upsert_reviews(
        db, reviewer_id=reviewer.id, review_period_id=period.id, reviews=batch
    )
    submissions.record_submission(db, reviewer.id, period.id)
    db.flush()

    logger.info(
        "Student %s submitted %s reviews for period %s", reviewer.id, count, period.period_name
    )
    return count
