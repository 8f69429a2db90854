from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def upsert(
    db: Session,
    model,
    *,
    values: dict,
    conflict_on: list[str],
    update_columns: list[str],
    extra_set: dict | None = None,
):
    """
    INSERT ... ON CONFLICT (conflict_on) DO UPDATE.

    On conflict, ``update_columns`` take the proposed values and ``extra_set``
    is applied as-is (e.g. ``{"created_at": func.now()}``).
    """
    dialect = db.get_bind().dialect.name
    insert = _INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Upsert is not supported on {dialect}")

    stmt = insert(model).values(**values)
    set_ = {col: stmt.excluded[col] for col in update_columns}
    if extra_set:
        set_.update(extra_set)
    stmt = stmt.on_conflict_do_update(index_elements=conflict_on, set_=set_)
    return db.execute(stmt)
