"""Insert-if-absent statements for the supported dialects."""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import Base

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def insert_if_absent(
    session: AsyncSession,
    model: type[Base],
    values: dict[str, Any],
    conflict_columns: list[str],
) -> Any | None:
    """Insert one row unless it collides on ``conflict_columns``.

    Runs as a single ``INSERT ... ON CONFLICT DO NOTHING RETURNING id`` so the
    existence check and the write cannot interleave with another request.
    Returns the new primary key, or None when the row already existed.
    """
    dialect = session.get_bind().dialect.name
    insert = _DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Conditional insert not supported for dialect {dialect}")

    stmt = (
        insert(model)
        .values(**values)
        .on_conflict_do_nothing(index_elements=conflict_columns)
        .returning(model.id)  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
