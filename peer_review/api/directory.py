from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from peer_review.core import directory
from peer_review.core.errors import store_errors
from peer_review.db.session import get_db
from peer_review.models.group import Group
from peer_review.models.review_question import ReviewQuestion
from peer_review.models.student import Student
from peer_review.schemas.directory import GroupOut, ReviewQuestionOut, StudentOut
from peer_review.schemas.fields import MAX_DB_INT

router = APIRouter(tags=["directory"])


def student_to_out(s: Student) -> StudentOut:
    return StudentOut(
        id=s.id,
        name=s.name,
        matric_number=s.matric_number,
        group_id=s.group_id,
    )


def group_to_out(g: Group) -> GroupOut:
    return GroupOut(id=g.id, name=g.name, created_at=g.created_at)


def question_to_out(q: ReviewQuestion) -> ReviewQuestionOut:
    return ReviewQuestionOut(
        id=q.id,
        question_number=q.question_number,
        question_text=q.question_text,
        max_score=q.max_score,
    )


@router.get("/groups", response_model=list[GroupOut])
def list_groups(db: Session = Depends(get_db)):
    with store_errors("fetch groups"):
        return [group_to_out(g) for g in directory.list_groups(db)]


@router.get("/groups/{group_id}/members", response_model=list[StudentOut])
def list_group_members(group_id: int = Path(ge=1, le=MAX_DB_INT), db: Session = Depends(get_db)):
    with store_errors("fetch group members"):
        return [student_to_out(s) for s in directory.group_members(db, group_id)]


# Declared before /students/{student_id} so "search" is not taken for an id
@router.get("/students/search", response_model=list[StudentOut])
def search_students(
    q: str | None = Query(default=None, description="Part of a student name"),
    db: Session = Depends(get_db),
):
    """
    Typeahead search by name. Short queries return an empty list.
    """
    with store_errors("search students"):
        return [student_to_out(s) for s in directory.search_students(db, q)]


@router.get("/students/{student_id}", response_model=StudentOut)
def get_student(student_id: int = Path(ge=1, le=MAX_DB_INT), db: Session = Depends(get_db)):
    with store_errors("fetch student"):
        return student_to_out(directory.get_student(db, student_id))


@router.get("/questions", response_model=list[ReviewQuestionOut])
def list_questions(db: Session = Depends(get_db)):
    with store_errors("fetch questions"):
        return [question_to_out(q) for q in directory.list_questions(db)]
