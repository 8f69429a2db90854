from peer_review.models.group import Group
from peer_review.models.review import Review
from peer_review.models.review_period import ReviewPeriod
from peer_review.models.review_question import ReviewQuestion
from peer_review.models.review_submission import ReviewSubmission
from peer_review.models.student import Student

__all__ = [ "Group", "Review", "ReviewPeriod",
           "ReviewQuestion", "ReviewSubmission", "Student" ]
