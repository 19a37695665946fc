import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

from app.exceptions.custom import MutationFailedError, ResourceNotFoundError, ValidationFailed
from app.mappers.payload_validator import FieldRule, normalize_payload, validate_payload
from app.services.database import Database

logger = logging.getLogger(__name__)


class ResourceService(ABC):
    """CRUD over one table through the storage gateway.

    Subclasses declare the table layout, the pydantic model rows are returned
    as, the create/update rule sets, and how an update body becomes the row
    that is written back (``_updated_values``).
    """

    label: ClassVar[str]
    table: ClassVar[str]
    id_column: ClassVar[str]
    fields: ClassVar[tuple[str, ...]]
    model: ClassVar[type[BaseModel]]
    create_rules: ClassVar[tuple[FieldRule, ...]]
    update_rules: ClassVar[tuple[FieldRule, ...]]

    def __init__(self, db: Database):
        self._db = db
        columns = ", ".join(self.fields)
        placeholders = ", ".join(f":{f}" for f in self.fields)
        assignments = ", ".join(f"{f} = :{f}" for f in self.fields)

        self._select_all_sql = f"SELECT * FROM {self.table}"
        self._select_one_sql = f"SELECT * FROM {self.table} WHERE {self.id_column} = :id"
        self._insert_sql = f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})"
        self._update_sql = f"UPDATE {self.table} SET {assignments} WHERE {self.id_column} = :id"
        self._delete_sql = f"DELETE FROM {self.table} WHERE {self.id_column} = :id"

    @property
    def _name(self) -> str:
        return self.label.lower()

    def _validate(
        self, payload: dict[str, Any], rules: tuple[FieldRule, ...]
    ) -> dict[str, Any]:
        errors = validate_payload(payload, rules)
        if errors:
            raise ValidationFailed(errors)
        return normalize_payload(payload, rules)

    @abstractmethod
    def _updated_values(
        self, current: dict[str, Any], payload: dict[str, Any]
    ) -> dict[str, Any]:
        ...

    async def _fetch(self, resource_id: str | int) -> dict[str, Any] | None:
        return await self._db.query_one(self._select_one_sql, {"id": resource_id})

    async def _require(self, resource_id: str) -> dict[str, Any]:
        row = await self._fetch(resource_id)
        if row is None:
            raise ResourceNotFoundError(self.label, resource_id)
        return row

    async def list_all(self) -> list[BaseModel]:
        rows = await self._db.query_all(self._select_all_sql)
        return [self.model(**row) for row in rows]

    async def get(self, resource_id: str) -> BaseModel:
        return self.model(**await self._require(resource_id))

    async def create(self, payload: dict[str, Any]) -> BaseModel:
        payload = self._validate(payload, self.create_rules)

        values = {field: payload[field] for field in self.fields}
        result = await self._db.execute(self._insert_sql, values)
        if result.rows_affected == 0 or result.generated_id is None:
            raise MutationFailedError(f"Failed to create {self._name}")

        row = await self._fetch(result.generated_id)
        if row is None:
            raise MutationFailedError(f"Failed to create {self._name}")

        logger.info("Created %s %s", self._name, result.generated_id)
        return self.model(**row)

    async def update(self, resource_id: str, payload: dict[str, Any]) -> BaseModel:
        payload = self._validate(payload, self.update_rules)
        current = await self._require(resource_id)

        values = self._updated_values(current, payload)
        result = await self._db.execute(self._update_sql, {**values, "id": resource_id})
        if result.rows_affected == 0:
            raise MutationFailedError(f"Failed to update {self._name}")

        # A concurrent delete can remove the row between the write and this read
        row = await self._fetch(resource_id)
        if row is None:
            raise ResourceNotFoundError(self.label, resource_id)

        logger.info("Updated %s %s", self._name, resource_id)
        return self.model(**row)

    async def delete(self, resource_id: str) -> BaseModel:
        current = await self._require(resource_id)

        result = await self._db.execute(self._delete_sql, {"id": resource_id})
        if result.rows_affected == 0:
            raise MutationFailedError(f"Failed to delete {self._name}")

        logger.info("Deleted %s %s", self._name, resource_id)
        return self.model(**current)
