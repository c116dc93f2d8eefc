# soroka_food/db/crud.py
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from sqlmodel import SQLModel, Session, select

M = TypeVar("M", bound=SQLModel)


def get_or_create(
    sess: Session,
    model: Type[M],
    defaults: Optional[Dict[str, Any]] = None,
    **lookup: Any,
) -> Tuple[M, bool]:
    """
    Upsert by unique key with an empty update: returns the existing row
    untouched, or adds `model(**lookup, **defaults)` and flushes it so the
    new id is available. Committing is left to the caller.
    """
    stmt = select(model)
    for column, value in lookup.items():
        stmt = stmt.where(getattr(model, column) == value)
    existing = sess.exec(stmt).one_or_none()
    if existing is not None:
        return existing, False

    obj = model(**lookup, **(defaults or {}))
    sess.add(obj)
    sess.flush()
    return obj, True
