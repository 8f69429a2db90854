from pydantic import BaseModel


class StudentResultOut(BaseModel):
    """Aggregated scores for one reviewed student"""
    student_id: int
    student_name: str
    matric_number: str
    avg_q1: float
    avg_q2: float
    overall_avg: float  # mean of per-review (q1 + q2) / 2
    review_count: int
