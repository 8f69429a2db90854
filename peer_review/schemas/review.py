from pydantic import BaseModel, Field

from peer_review.schemas.fields import DbId


class ReviewIn(BaseModel):
    reviewed_id: DbId
    # Range is checked for the whole batch in core.admission, so a bad score
    # rejects the request with the same 400 as every other batch problem.
    question1_score: int
    question2_score: int


class SubmitReviewsRequest(BaseModel):
    reviewer_id: DbId | None = None
    review_period_id: DbId | None = None
    reviews: list[ReviewIn] = Field(default_factory=list)


class SubmitReviewsOut(BaseModel):
    count: int
    message: str = "Reviews submitted successfully"
