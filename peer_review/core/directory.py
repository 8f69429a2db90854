from sqlalchemy.orm import Session

from peer_review.core.config import settings
from peer_review.core.errors import NotFoundError
from peer_review.models.group import Group
from peer_review.models.review_question import ReviewQuestion
from peer_review.models.student import Student


def get_student(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if not student:
        raise NotFoundError("Student not found")
    return student


def get_student_by_matric(db: Session, matric_number: str) -> Student | None:
    return db.query(Student).filter(Student.matric_number == matric_number).one_or_none()


def get_group(db: Session, group_id: int) -> Group:
    group = db.get(Group, group_id)
    if not group:
        raise NotFoundError("Group not found")
    return group


def list_groups(db: Session) -> list[Group]:
    return db.query(Group).order_by(Group.name.asc(), Group.id.asc()).all()


def group_members(db: Session, group_id: int) -> list[Student]:
    return (
        db.query(Student)
        .filter(Student.group_id == group_id)
        .order_by(Student.name.asc(), Student.id.asc())
        .all()
    )


def search_students(db: Session, q: str | None) -> list[Student]:
    """Case-insensitive substring match on name, for the typeahead."""
    if not q or len(q) < settings.SEARCH_MIN_LENGTH:
        return []
    return (
        db.query(Student)
        .filter(Student.name.ilike(f"%{q}%"))
        .order_by(Student.name.asc())
        .limit(settings.SEARCH_RESULT_LIMIT)
        .all()
    )


def list_questions(db: Session) -> list[ReviewQuestion]:
    return db.query(ReviewQuestion).order_by(ReviewQuestion.question_number.asc()).all()
