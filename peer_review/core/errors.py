"""
Error taxonomy for the review portal.

Core functions raise these; the request boundary (see ``peer_review.main``)
turns them into ``{"detail": ..., "code": ...}`` responses.
"""
from contextlib import contextmanager

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from peer_review.core.logging import get_logger

logger = get_logger(__name__)


class PeerReviewError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "error"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PeerReviewError):
    """Malformed or out-of-range input. Caller must correct and retry."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_message = "Invalid request"


class NotFoundError(PeerReviewError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class ConflictError(PeerReviewError):
    # Original API reported duplicates as 400, clients rely on it
    status_code = status.HTTP_400_BAD_REQUEST
    code = "conflict"
    default_message = "Already exists"


class NoActivePeriodError(PeerReviewError):
    """Valid request, but no review window is open. Needs an administrator."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "no_active_period"
    default_message = "No active review period. Please contact your administrator."


class StoreError(PeerReviewError):
    """Backing store failure. Transient; message never carries internals."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "store_error"
    default_message = "Data store error"


@contextmanager
def store_errors(action: str):
    """
    Usage:
      with store_errors("fetch periods"):
          ...

    Any SQLAlchemyError inside the block is logged and re-raised as
    StoreError("Failed to fetch periods"). Domain errors pass through.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store failure while trying to %s", action)
        raise StoreError(f"Failed to {action}") from exc
