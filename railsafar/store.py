import logging
import threading
from contextlib import contextmanager
from enum import Enum
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import Integer, cast, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from railsafar.config import get_settings
from railsafar.database import Base, build_engine, build_session_factory
from railsafar import models
from railsafar.auth.schemas import User
from railsafar.trains.schemas import Train, Schedule
from railsafar.bookings.schemas import Booking
from railsafar.seed_data import create_seed_data

logger = logging.getLogger(__name__)

TABLES = {
    "users": models.User,
    "trains": models.Train,
    "schedules": models.Schedule,
    "bookings": models.Booking,
}


class MalformedRowError(SQLAlchemyError):
    """A stored row that does not fit its entity schema"""


class Store:
    """
    Durable storage for users, trains, schedules and bookings.

    The store is the only component that touches the database. Each
    operation runs in its own short session and commits before returning.
    Storage failures (``SQLAlchemyError`` and subclasses such as
    ``IntegrityError``) propagate to the caller untouched. Rows that the
    entity schemas reject are reported as ``MalformedRowError``, which is
    a ``SQLAlchemyError`` too.

    Id allocation is ``max(existing integer id) + 1``. It is a read followed
    by a write, so callers that allocate and insert must hold ``lock`` for
    the whole sequence.
    """

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        settings = get_settings()
        self.database_url = database_url or settings.DATABASE_URL
        self.engine = build_engine(
            self.database_url,
            echo=settings.SQL_ECHO if echo is None else echo
        )
        self.SessionLocal = build_session_factory(self.engine)
        self.lock = threading.RLock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Release every pooled connection"""
        self.engine.dispose()

    @contextmanager
    def session(self):
        db: Session = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ================================
    # Schema lifecycle
    # ================================
    def initialize(self, seed: Optional[bool] = None) -> List[str]:
        """Create missing tables, then seed every table that is still empty"""
        if seed is None:
            seed = get_settings().SEED_DATA

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url.render_as_string(hide_password=True))

        if not seed:
            return []

        with self.lock, self.session() as db:
            seeded = create_seed_data(db)
        if seeded:
            logger.info("Seeded tables: %s", ", ".join(seeded))
        return seeded

    # ================================
    # Generic helpers
    # ================================
    @staticmethod
    def _values(entity) -> dict:
        values = entity.model_dump()
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in values.items()
        }

    @staticmethod
    def _to_schema(schema, row):
        try:
            return schema.model_validate(row)
        except ValidationError as e:
            raise MalformedRowError(
                f"Malformed {row.__tablename__} row {row.id!r}: {e}"
            ) from e

    def _find(self, model, schema, *criteria):
        with self.session() as db:
            row = db.query(model).filter(*criteria).first()
            return self._to_schema(schema, row) if row else None

    def _list(self, model, schema) -> list:
        with self.session() as db:
            return [self._to_schema(schema, row) for row in db.query(model).all()]

    def _insert(self, model, entity):
        with self.session() as db:
            db.add(model(**self._values(entity)))
        return entity

    def _update(self, model, entity) -> bool:
        values = self._values(entity)
        entity_id = values.pop("id")
        with self.session() as db:
            updated = db.query(model).filter(model.id == entity_id).update(
                values, synchronize_session=False
            )
        return updated == 1

    def _delete(self, model, entity_id: str) -> bool:
        with self.session() as db:
            deleted = db.query(model).filter(model.id == entity_id).delete(
                synchronize_session=False
            )
        return deleted > 0

    def next_id(self, table: str) -> str:
        """Highest integer id in ``table`` plus one, as text"""
        model = TABLES[table]
        with self.session() as db:
            highest = db.query(func.max(cast(model.id, Integer))).scalar()
        return str((highest or 0) + 1)

    # ================================
    # Users
    # ================================
    def find_user_by_id(self, user_id: str) -> Optional[User]:
        return self._find(models.User, User, models.User.id == user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup"""
        return self._find(
            models.User, User, func.lower(models.User.email) == func.lower(email)
        )

    def list_users(self) -> List[User]:
        return self._list(models.User, User)

    def add_user(self, user: User) -> User:
        return self._insert(models.User, user)

    def update_user(self, user: User) -> bool:
        return self._update(models.User, user)

    def email_exists(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        """Whether another user (not ``exclude_user_id``) already holds ``email``"""
        with self.session() as db:
            count = db.query(func.count(models.User.id)).filter(
                func.lower(models.User.email) == func.lower(email),
                models.User.id != (exclude_user_id or "")
            ).scalar()
        return count > 0

    def next_user_id(self) -> str:
        return self.next_id("users")

    # ================================
    # Trains
    # ================================
    def find_train_by_id(self, train_id: str) -> Optional[Train]:
        return self._find(models.Train, Train, models.Train.id == train_id)

    def find_train_by_number(self, train_number: str) -> Optional[Train]:
        return self._find(models.Train, Train, models.Train.train_number == train_number)

    def list_trains(self) -> List[Train]:
        return self._list(models.Train, Train)

    def add_train(self, train: Train) -> Train:
        return self._insert(models.Train, train)

    def update_train(self, train: Train) -> bool:
        return self._update(models.Train, train)

    def remove_train(self, train_id: str) -> bool:
        return self._delete(models.Train, train_id)

    def next_train_id(self) -> str:
        return self.next_id("trains")

    # ================================
    # Schedules
    # ================================
    def find_schedule_by_id(self, schedule_id: str) -> Optional[Schedule]:
        return self._find(models.Schedule, Schedule, models.Schedule.id == schedule_id)

    def find_schedule_by_train_number(self, train_number: str) -> Optional[Schedule]:
        return self._find(
            models.Schedule, Schedule, models.Schedule.train_number == train_number
        )

    def list_schedules(self) -> List[Schedule]:
        return self._list(models.Schedule, Schedule)

    def add_schedule(self, schedule: Schedule) -> Schedule:
        return self._insert(models.Schedule, schedule)

    def update_schedule(self, schedule: Schedule) -> bool:
        return self._update(models.Schedule, schedule)

    def remove_schedule(self, schedule_id: str) -> bool:
        return self._delete(models.Schedule, schedule_id)

    def next_schedule_id(self) -> str:
        return self.next_id("schedules")

    # ================================
    # Bookings
    # ================================
    def find_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        return self._find(models.Booking, Booking, models.Booking.id == booking_id)

    def list_bookings(self) -> List[Booking]:
        return self._list(models.Booking, Booking)

    def add_booking(self, booking: Booking) -> Booking:
        return self._insert(models.Booking, booking)

    def update_booking(self, booking: Booking) -> bool:
        return self._update(models.Booking, booking)

    def next_booking_id(self) -> str:
        return self.next_id("bookings")
