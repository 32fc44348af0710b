from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
import logging

from fastapi import HTTPException, status
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.stamps import new_id, next_timestamp, utcnow

logger = logging.getLogger(__name__)

OrderBy = Union[str, Sequence[str]]


class CollectionService:
    """
    Generic list/create/update/delete/get operations over one table.

    Subclasses set ``model``, ``id_prefix`` and ``label``. Records are keyed by
    string ids; ``created_field`` is stamped on create and ``updated_field``
    (when the table has one) is refreshed on every update.
    """

    model: Any = None
    id_prefix: str = "record"
    label: str = "Record"
    created_field: str = "created_at"
    updated_field: Optional[str] = "updated_at"

    @classmethod
    def column_names(cls) -> List[str]:
        return [column.key for column in inspect(cls.model).column_attrs]

    @classmethod
    def protected_fields(cls) -> Iterable[str]:
        """Fields callers may never overwrite through update()."""
        return {"id", cls.created_field, cls.updated_field} - {None}

    @classmethod
    def _order_clauses(cls, order_by: OrderBy) -> list:
        # "-updated_at" sorts descending, "name" ascending
        if isinstance(order_by, str):
            order_by = [order_by]
        clauses = []
        for spec in order_by:
            descending = spec.startswith("-")
            column = getattr(cls.model, spec.lstrip("-"))
            clauses.append(column.desc() if descending else column.asc())
        return clauses

    @classmethod
    def list(
        cls,
        db: Session,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> list:
        """List records matching equality filters, optionally ordered and limited."""
        query = db.query(cls.model)
        for field, value in (filters or {}).items():
            query = query.filter(getattr(cls.model, field) == value)
        if order_by:
            query = query.order_by(*cls._order_clauses(order_by))
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    @classmethod
    def get_by_id(cls, db: Session, record_id: str):
        """Return the record or None when it does not exist."""
        return db.query(cls.model).filter(cls.model.id == record_id).first()

    @classmethod
    def count(cls, db: Session, filters: Optional[Dict[str, Any]] = None) -> int:
        query = db.query(cls.model)
        for field, value in (filters or {}).items():
            query = query.filter(getattr(cls.model, field) == value)
        return query.count()

    @classmethod
    def _check_fields(cls, fields: Dict[str, Any], allow_protected: bool = False) -> None:
        known = set(cls.column_names())
        unknown = [name for name in fields if name not in known]
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown {cls.label.lower()} fields: {', '.join(sorted(unknown))}"
            )
        if not allow_protected:
            protected = [name for name in fields if name in cls.protected_fields()]
            if protected:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Fields cannot be changed: {', '.join(sorted(protected))}"
                )

    @classmethod
    def _coerce_enums(cls, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Convert enum column values to their members; values outside the enum are a 422."""
        coerced = dict(fields)
        for attr in inspect(cls.model).column_attrs:
            enum_class = getattr(attr.columns[0].type, "enum_class", None)
            if enum_class is None or coerced.get(attr.key) is None:
                continue
            try:
                coerced[attr.key] = enum_class(coerced[attr.key])
            except ValueError:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Invalid {attr.key}: {coerced[attr.key]}"
                )
        return coerced

    @classmethod
    def build(cls, **fields):
        """Instantiate a stamped, unsaved record."""
        record_id = fields.pop("id", None) or new_id(cls.id_prefix)
        cls._check_fields(fields, allow_protected=True)
        fields = cls._coerce_enums(fields)
        now = utcnow()
        record = cls.model(id=record_id, **fields)
        setattr(record, cls.created_field, now)
        if cls.updated_field:
            setattr(record, cls.updated_field, now)
        return record

    @classmethod
    def create(cls, db: Session, **fields) -> str:
        """
        Persist a new record and return its id.

        An explicit ``id`` keyword is honoured; otherwise a fresh one is generated.

        Raises:
            HTTPException: 409 if the record conflicts with existing data
        """
        record = cls.build(**fields)
        db.add(record)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Failed to create {cls.label.lower()} {record.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"{cls.label} conflicts with existing data"
            )
        logger.info(f"Created {cls.label.lower()} {record.id}")
        return record.id

    @classmethod
    def update(cls, db: Session, record_id: str, fields: Dict[str, Any]):
        """
        Merge ``fields`` into the stored record and refresh its update stamp.

        Raises:
            HTTPException: 404 if the record does not exist, 422 for unknown or
                protected fields and for values outside an enum column
        """
        record = cls.get_by_id(db, record_id)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{cls.label} not found"
            )
        cls._check_fields(fields)
        fields = cls._coerce_enums(fields)

        for field, value in fields.items():
            setattr(record, field, value)
        if cls.updated_field:
            setattr(record, cls.updated_field, next_timestamp(getattr(record, cls.updated_field)))

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Failed to update {cls.label.lower()} {record_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"{cls.label} conflicts with existing data"
            )
        db.refresh(record)
        return record

    @classmethod
    def delete(cls, db: Session, record_id: str) -> bool:
        """
        Remove the record. Deleting an id that does not exist is a no-op.

        Returns:
            True if a record was removed, False if there was nothing to delete
        """
        record = cls.get_by_id(db, record_id)
        if record is None:
            logger.info(f"Delete of missing {cls.label.lower()} {record_id} ignored")
            return False
        db.delete(record)
        db.commit()
        logger.info(f"Deleted {cls.label.lower()} {record_id}")
        return True
