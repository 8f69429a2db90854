from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from peer_review.api.directory import student_to_out
from peer_review.core import admission
from peer_review.core.errors import store_errors
from peer_review.db.session import get_db
from peer_review.schemas.auth import LoginOut, LoginRequest

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Identifier-only login: no secret is checked.

    Returns the student, the open period and whether this student has
    already submitted for it.
    """
    with store_errors("authenticate"):
        result = admission.login(db, payload.matric_number)
    return LoginOut(
        student=student_to_out(result.student),
        period_id=result.period.id,
        period_name=result.period.period_name,
        already_submitted=result.already_submitted,
    )
