import logging

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.models.users import User

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def find_user_id(db: Session, full_name: str) -> int | None:
    return db.scalar(select(User.id).where(User.full_name == full_name))


def get_user_id(db: Session, full_name: str) -> int:
    """
    Resolve a display name to its user id, creating the user on first sight.

    Runs as a single upsert against the unique constraint on full_name, so two
    concurrent first bookings by the same new name end up with one record.
    """
    dialect = db.get_bind().dialect.name
    try:
        insert = _INSERT_BY_DIALECT[dialect]
    except KeyError:
        raise RuntimeError(f"User upsert is not supported on {dialect!r}") from None

    stmt = insert(User).values(full_name=full_name)
    # DO UPDATE rather than DO NOTHING so RETURNING yields the existing row too
    stmt = stmt.on_conflict_do_update(
        index_elements=[User.full_name],
        set_={"full_name": stmt.excluded.full_name},
    ).returning(User.id)

    user_id = db.execute(stmt).scalar_one()
    db.commit()
    logger.debug("resolved user", extra={"full_name": full_name, "user_id": user_id})
    return user_id
