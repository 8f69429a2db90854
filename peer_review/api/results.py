from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from peer_review.core import periods
from peer_review.core.aggregation import compute_group_results
from peer_review.core.directory import get_group
from peer_review.core.errors import store_errors
from peer_review.core.export import export_filename, results_to_csv
from peer_review.db.session import get_db
from peer_review.schemas.fields import MAX_DB_INT
from peer_review.schemas.results import StudentResultOut

router = APIRouter(prefix="/results", tags=["results"])


@router.get("", response_model=list[StudentResultOut])
def group_results(
    period_id: int = Query(..., ge=1, le=MAX_DB_INT, description="Review period"),
    group_id: int = Query(..., ge=1, le=MAX_DB_INT, description="Group whose members were reviewed"),
    db: Session = Depends(get_db),
):
    """
    Average scores per reviewed student, ordered by name.
    Students nobody has reviewed yet are left out.
    """
    with store_errors("fetch results"):
        results = compute_group_results(db, period_id=period_id, group_id=group_id)
    return [StudentResultOut(**asdict(r)) for r in results]


@router.get("/export")
def export_group_results(
    period_id: int = Query(..., ge=1, le=MAX_DB_INT, description="Review period"),
    group_id: int = Query(..., ge=1, le=MAX_DB_INT, description="Group whose members were reviewed"),
    db: Session = Depends(get_db),
):
    with store_errors("export results"):
        period = periods.get_period(db, period_id)
        group = get_group(db, group_id)
        results = compute_group_results(db, period_id=period.id, group_id=group.id)

    filename = export_filename(group.name, period.period_name)
    return Response(
        content=results_to_csv(results),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
