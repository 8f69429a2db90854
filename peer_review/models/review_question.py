from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from peer_review.db.base import Base


class ReviewQuestion(Base):
    __tablename__ = "review_questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    question_number: Mapped[int] = mapped_column(Integer, nullable=False)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    max_score: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
