from pydantic import BaseModel

from peer_review.schemas.directory import StudentOut


class LoginRequest(BaseModel):
    matric_number: str | None = None


class LoginOut(BaseModel):
    student: StudentOut
    period_id: int
    period_name: str
    already_submitted: bool
