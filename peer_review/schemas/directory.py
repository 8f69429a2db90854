from datetime import datetime
from pydantic import BaseModel


class StudentOut(BaseModel):
    id: int
    name: str
    matric_number: str
    group_id: int


class GroupOut(BaseModel):
    id: int
    name: str
    created_at: datetime


class ReviewQuestionOut(BaseModel):
    id: int
    question_number: int
    question_text: str
    max_score: int
