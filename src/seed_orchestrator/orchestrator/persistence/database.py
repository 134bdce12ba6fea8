"""Seed record persistence backed by SQLAlchemy Core.

Every seeded entity is stored as one row in `seed_records`, identified by its
entity type and a natural key (role name, user email, coupon code, ...).
Writes are upserts on that pair, so running the seeder twice against the same
database does not duplicate anything.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

metadata = sa.MetaData()

seed_records = sa.Table(
    "seed_records",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("entity", sa.String(100), nullable=False),
    sa.Column("natural_key", sa.String(255), nullable=False),
    sa.Column("payload", sa.JSON, nullable=False),
    sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    sa.UniqueConstraint("entity", "natural_key", name="uq_seed_records_entity_key"),
)


class SeedRecord(BaseModel):
    """A persisted seed entity as seen by task bodies."""

    model_config = ConfigDict(frozen=True)

    id: int
    entity: str
    key: str
    data: dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, item: str) -> Any:
        return self.data[item]

    def get(self, item: str, default: Any = None) -> Any:
        return self.data.get(item, default)


class SeedDatabase:
    """Owns the SQLAlchemy engine for one seed run.

    Construct it once at process start, hand it to the seed bodies that need
    it, and `close()` it when the run ends.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self._url = url
        self._engine = sa.create_engine(url, echo=echo)
        logger.info("Database engine created", extra={"url": self._engine.url.render_as_string()})

    @property
    def engine(self) -> sa.Engine:
        return self._engine

    def create_schema(self) -> None:
        metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()
        logger.debug("Database engine disposed")

    def __enter__(self) -> SeedDatabase:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def upsert(
        self,
        entity: str,
        key: str,
        data: Mapping[str, Any],
        *,
        update: bool = True,
    ) -> SeedRecord:
        """Insert or update the record identified by (entity, key).

        Args:
            update: When False an existing row is returned untouched.
        """

        now = datetime.now(UTC)
        payload = dict(data)
        where = sa.and_(seed_records.c.entity == entity, seed_records.c.natural_key == key)

        with self._engine.begin() as conn:
            row = conn.execute(
                sa.select(seed_records.c.id, seed_records.c.payload).where(where)
            ).first()

            if row is None:
                result = conn.execute(
                    sa.insert(seed_records).values(
                        entity=entity,
                        natural_key=key,
                        payload=payload,
                        created_at=now,
                        updated_at=now,
                    )
                )
                record_id = int(result.inserted_primary_key[0])
            elif update:
                conn.execute(
                    sa.update(seed_records)
                    .where(seed_records.c.id == row.id)
                    .values(payload=payload, updated_at=now)
                )
                record_id = int(row.id)
            else:
                record_id = int(row.id)
                payload = dict(row.payload)

        return SeedRecord(id=record_id, entity=entity, key=key, data=payload)

    def upsert_many(
        self,
        entity: str,
        items: Iterable[Mapping[str, Any]],
        key_fn: Callable[[Mapping[str, Any]], str],
        *,
        update: bool = True,
        continue_on_error: bool = False,
    ) -> list[SeedRecord]:
        """Upsert a batch of items of one entity type.

        With `continue_on_error`, an item that fails is logged and skipped and
        the rest of the batch is still written.
        """

        records: list[SeedRecord] = []
        errors = 0
        for item in items:
            try:
                record = self.upsert(entity, key_fn(item), item, update=update)
            except Exception:
                if not continue_on_error:
                    raise
                errors += 1
                logger.exception("Failed to upsert seed record", extra={"entity": entity})
                continue
            logger.debug("Seed record upserted", extra={"entity": entity, "key": record.key})
            records.append(record)

        if errors:
            logger.warning(
                "Seed batch finished with errors",
                extra={"entity": entity, "written": len(records), "errors": errors},
            )
        else:
            logger.info("Seed batch written", extra={"entity": entity, "written": len(records)})
        return records

    def find(self, entity: str, key: str) -> SeedRecord | None:
        stmt = sa.select(seed_records).where(
            seed_records.c.entity == entity, seed_records.c.natural_key == key
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return None if row is None else _to_record(row)

    def find_all(self, entity: str) -> list[SeedRecord]:
        stmt = (
            sa.select(seed_records)
            .where(seed_records.c.entity == entity)
            .order_by(seed_records.c.id)
        )
        with self._engine.connect() as conn:
            return [_to_record(row) for row in conn.execute(stmt)]

    def count(self, entity: str | None = None) -> int:
        stmt = sa.select(sa.func.count()).select_from(seed_records)
        if entity is not None:
            stmt = stmt.where(seed_records.c.entity == entity)
        with self._engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())


def _to_record(row: sa.Row[Any]) -> SeedRecord:
    return SeedRecord(
        id=row.id,
        entity=row.entity,
        key=row.natural_key,
        data=dict(row.payload),
    )
