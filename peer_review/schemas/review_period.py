from pydantic import BaseModel, Field

from peer_review.core.periods import MAX_YEAR, MIN_YEAR
from peer_review.schemas.fields import DbId


class ReviewPeriodCreate(BaseModel):
    # Month range is checked in core.periods.create_period
    month: int | None = None
    year: int | None = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)


class ActivatePeriodRequest(BaseModel):
    period_id: DbId | None = None


class ReviewPeriodOut(BaseModel):
    id: int
    period_name: str
    month: int
    year: int
    is_active: bool


class ReviewPeriodEnvelope(BaseModel):
    period: ReviewPeriodOut


class MessageOut(BaseModel):
    message: str
