from sqlalchemy.orm import Session

from peer_review.core.periods import period_name_for
from peer_review.models.group import Group
from peer_review.models.review import Review
from peer_review.models.review_period import ReviewPeriod
from peer_review.models.review_question import ReviewQuestion
from peer_review.models.review_submission import ReviewSubmission
from peer_review.models.student import Student


def create_group(db: Session, name: str = "Alpha Team") -> Group:
    g = Group(name=name)
    db.add(g)
    db.commit()
    db.refresh(g)
    return g


def create_student(db: Session, group: Group, name: str, matric_number: str) -> Student:
    s = Student(name=name, matric_number=matric_number, group_id=group.id)
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def create_period(db: Session, month: int = 3, year: int = 2025, is_active: bool = False) -> ReviewPeriod:
    p = ReviewPeriod(
        period_name=period_name_for(month, year),
        month=month,
        year=year,
        is_active=is_active,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def create_question(db: Session, number: int, text: str = "Question") -> ReviewQuestion:
    q = ReviewQuestion(question_number=number, question_text=text, max_score=5)
    db.add(q)
    db.commit()
    db.refresh(q)
    return q


def create_review(db: Session, *, reviewer: Student, reviewed: Student, period: ReviewPeriod, q1: int, q2: int) -> Review:
    r = Review(
        reviewer_id=reviewer.id,
        reviewed_id=reviewed.id,
        review_period_id=period.id,
        question1_score=q1,
        question2_score=q2,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


def mark_submitted(db: Session, student: Student, period: ReviewPeriod) -> ReviewSubmission:
    row = ReviewSubmission(student_id=student.id, review_period_id=period.id)
    db.add(row)
    db.commit()
    return row


def seed_group_of(db: Session, names: list[str], group_name: str = "Alpha Team", start: int = 1) -> tuple[Group, list[Student]]:
    """Group plus members with sequential matric numbers SC6/2510/NNN."""
    group = create_group(db, group_name)
    students = [
        create_student(db, group, name, f"SC6/2510/{start + i:03d}")
        for i, name in enumerate(names)
    ]
    return group, students


def active_periods(db: Session) -> list[ReviewPeriod]:
    db.expire_all()
    return db.query(ReviewPeriod).filter(ReviewPeriod.is_active.is_(True)).all()


def reviews_for(db: Session, *, reviewer_id: int, review_period_id: int) -> list[Review]:
    return (
        db.query(Review)
        .filter(Review.reviewer_id == reviewer_id, Review.review_period_id == review_period_id)
        .order_by(Review.reviewed_id)
        .all()
    )
