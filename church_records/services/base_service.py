from typing import Generic, TypeVar
import logging

from church_records.exceptions import ConflictError, NotFoundError
from church_records.utils.timestamps import next_modified_at, now_epoch
from church_records.utils.validation import FieldValidator

logger = logging.getLogger(__name__)

IdT = TypeVar("IdT", bound=int)
ModelT = TypeVar("ModelT")


class BaseService(Generic[IdT, ModelT]):
    """create / get_by_id / list / update / delete / count for one entity.

    Subclasses set ``repository`` and ``label`` and describe their fields in
    ``_validator``. ``_check_references`` raises NotFoundError for a missing
    parent and ``_dependents`` returns a message when rows still point at the
    record.
    """

    repository = None
    label = "Record"

    @classmethod
    def _validator(cls, data, existing=None) -> FieldValidator:
        raise NotImplementedError

    @classmethod
    def _check_references(cls, fields):
        pass

    @classmethod
    def _dependents(cls, record_id: IdT) -> str | None:
        return None

    @classmethod
    def create(cls, data) -> ModelT:
        """Validates and inserts a record, stamping created_at and modified_at."""
        validator = cls._validator(data)
        record_id = validator.identifier()
        validator.timestamps()
        fields = dict(validator.raise_if_invalid())
        cls._check_references(fields)

        if record_id is not None and cls.repository.find_by_id(record_id):
            logger.warning(f"{cls.label} create refused, id {record_id} exists")
            raise ConflictError(f"{cls.label} {record_id} already exists")

        now = now_epoch()
        created_at = fields.pop("created_at", None)
        modified_at = fields.pop("modified_at", None)
        if created_at is None:
            created_at = now if modified_at is None else min(now, modified_at)
        if modified_at is None:
            modified_at = max(now, created_at)

        record = cls.repository.model(
            **fields, created_at=created_at, modified_at=modified_at
        )
        cls.repository.add(record)
        logger.info(f"{cls.label} created: {record.id}")
        return record

    @classmethod
    def get_by_id(cls, record_id: IdT) -> ModelT:
        """Gets a record or raises NotFoundError."""
        record = cls.repository.find_by_id(record_id)
        if not record:
            raise NotFoundError(f"{cls.label} {record_id} not found")
        return record

    @classmethod
    def list(cls, **filters):
        """Lists records matching the filters, newest first."""
        return cls.repository.find_all(**filters)

    @classmethod
    def count(cls, **filters) -> int:
        """Counts records matching the filters."""
        return cls.repository.count(**filters)

    @classmethod
    def update(cls, record_id: IdT, data) -> ModelT:
        """Replaces every field of a record and refreshes modified_at."""
        record = cls.get_by_id(record_id)
        fields = cls._validator(data, existing=record).raise_if_invalid()
        cls._check_references(fields)

        for key, value in fields.items():
            setattr(record, key, value)
        record.modified_at = next_modified_at(record.modified_at)
        cls.repository.save(record)
        logger.info(f"{cls.label} updated: {record.id}")
        return record

    @classmethod
    def delete(cls, record_id: IdT):
        """Deletes a record unless other rows still reference it."""
        record = cls.get_by_id(record_id)
        blocked = cls._dependents(record_id)
        if blocked:
            logger.warning(f"{cls.label} {record_id} delete refused: {blocked}")
            raise ConflictError(blocked)

        cls.repository.delete(record)
        logger.info(f"{cls.label} deleted: {record_id}")
