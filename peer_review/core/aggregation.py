"""
Per-student score aggregation for one group in one review period.

Sums and counts come from SQL; the averages are divided and rounded here with
Decimal so rounding is half-up and happens once, at the end.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from peer_review.models.review import Review
from peer_review.models.student import Student

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class StudentResult:
    student_id: int
    student_name: str
    matric_number: str
    avg_q1: float
    avg_q2: float
    overall_avg: float
    review_count: int


def mean_2dp(total, count: int) -> float:
    """total / count rounded half-up to 2 places; 0 when there is nothing to average."""
    if not count:
        return 0.0
    value = Decimal(total) / Decimal(count)
    return float(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_group_results(db: Session, *, period_id: int, group_id: int) -> list[StudentResult]:
    review_count = func.count(Review.id)
    rows = (
        db.query(
            Student.id,
            Student.name,
            Student.matric_number,
            func.coalesce(func.sum(Review.question1_score), 0),
            func.coalesce(func.sum(Review.question2_score), 0),
            review_count,
        )
        .outerjoin(
            Review,
            and_(Review.reviewed_id == Student.id, Review.review_period_id == period_id),
        )
        .filter(Student.group_id == group_id)
        .group_by(Student.id, Student.name, Student.matric_number)
        # No reviews yet is not the same as a score of 0
        .having(review_count > 0)
        .order_by(Student.name.asc(), Student.id.asc())
        .all()
    )

    results = []
    for student_id, name, matric, q1_total, q2_total, count in rows:
        results.append(
            StudentResult(
                student_id=student_id,
                student_name=name,
                matric_number=matric,
                avg_q1=mean_2dp(q1_total, count),
                avg_q2=mean_2dp(q2_total, count),
                # mean of per-row (q1 + q2) / 2
                overall_avg=mean_2dp(Decimal(q1_total + q2_total) / 2, count),
                review_count=count,
            )
        )
    return results
