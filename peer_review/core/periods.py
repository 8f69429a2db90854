"""
Review period lifecycle.

Only one period may be active at a time. Activation is two UPDATEs run inside
the caller's transaction (see ``db.session.get_db``), so readers never see a
committed state with zero or two active periods.
"""
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from peer_review.core.errors import ConflictError, NotFoundError, ValidationError
from peer_review.core.logging import get_logger
from peer_review.models.review_period import ReviewPeriod

logger = get_logger(__name__)

# Fixed English table, independent of process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MIN_YEAR = 1
MAX_YEAR = 9999


def period_name_for(month: int, year: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def list_periods(db: Session) -> list[ReviewPeriod]:
    return (
        db.query(ReviewPeriod)
        .order_by(ReviewPeriod.year.desc(), ReviewPeriod.month.desc())
        .all()
    )


def get_period(db: Session, period_id: int) -> ReviewPeriod:
    period = db.get(ReviewPeriod, period_id)
    if not period:
        raise NotFoundError("Period not found")
    return period


def get_active_period(db: Session) -> ReviewPeriod:
    period = (
        db.query(ReviewPeriod)
        .filter(ReviewPeriod.is_active.is_(True))
        .order_by(ReviewPeriod.id)
        .first()
    )
    if not period:
        raise NotFoundError("No active review period")
    return period


def find_period(db: Session, month: int, year: int) -> ReviewPeriod | None:
    return (
        db.query(ReviewPeriod)
        .filter(ReviewPeriod.month == month, ReviewPeriod.year == year)
        .one_or_none()
    )


def create_period(db: Session, *, month: int | None, year: int | None) -> ReviewPeriod:
    if not month or not year:
        raise ValidationError("Month and year are required")
    if month < 1 or month > 12:
        raise ValidationError("Invalid month (must be 1-12)")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(f"Invalid year (must be {MIN_YEAR}-{MAX_YEAR})")

    if find_period(db, month, year):
        raise ConflictError("A period for this month and year already exists")

    period = ReviewPeriod(
        period_name=period_name_for(month, year),
        month=month,
        year=year,
        is_active=False,
    )
    try:
        # SAVEPOINT so a lost race only undoes this insert, not the caller's work
        with db.begin_nested():
            db.add(period)
            db.flush()
    except IntegrityError as exc:
        raise ConflictError("A period for this month and year already exists") from exc

    logger.info("Created review period %s (id=%s)", period.period_name, period.id)
    return period


def activate_period(db: Session, period_id: int | None) -> ReviewPeriod:
    if not period_id:
        raise ValidationError("Period ID is required")

    period = get_period(db, period_id)

    # Every row, not only active ones: concurrent activations serialize on the row locks
    db.execute(update(ReviewPeriod).values(is_active=False))
    db.execute(
        update(ReviewPeriod)
        .where(ReviewPeriod.id == period.id)
        .values(is_active=True)
    )
    db.flush()
    db.refresh(period)

    logger.info("Activated review period %s (id=%s)", period.period_name, period.id)
    return period


def deactivate_all(db: Session) -> None:
    db.execute(update(ReviewPeriod).values(is_active=False))
    db.flush()
    logger.info("Deactivated all review periods")
