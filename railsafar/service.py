import logging
from datetime import date
from typing import Optional

from railsafar.config import get_settings
from railsafar.store import Store
from railsafar.results import Result
from railsafar.auth.service import UserService
from railsafar.auth.schemas import User, UserCreate
from railsafar.trains.service import TrainService
from railsafar.trains.schemas import Train, Schedule, ScheduleFilter
from railsafar.bookings.booking_service import BookingService

logger = logging.getLogger(__name__)

class RailwayService:
    """
    Entry point for the presentation layer.

    Wraps one Store and exposes every user, train, schedule and booking
    operation. All methods return a ``Result``; storage failures come back
    as ``ResultStatus.STORAGE_ERROR`` instead of being raised.
    """

    def __init__(self, store: Store):
        self.store = store
        self.users = UserService(store)
        self.trains = TrainService(store)
        self.bookings = BookingService(store)

    @classmethod
    def open(cls, database_url: Optional[str] = None, seed: Optional[bool] = None) -> "RailwayService":
        """Open the configured database, create and seed it, and wrap it"""
        store = Store(database_url or get_settings().DATABASE_URL)
        try:
            store.initialize(seed=seed)
        except Exception:
            store.close()
            raise
        logger.info("Railway service ready")
        return cls(store)

    def close(self):
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ================================
    # Users
    # ================================
    def authenticate(self, email: str, password: str, role: str) -> Result:
        return self.users.authenticate(email, password, role)

    def register(self, user: UserCreate) -> Result:
        return self.users.register(user)

    def email_exists(self, email: str) -> Result:
        return self.users.email_exists(email)

    def get_user_by_id(self, user_id: str) -> Result:
        return self.users.get_user_by_id(user_id)

    def update_user(self, user: User) -> Result:
        return self.users.update_user(user)

    # ================================
    # Trains & Schedules
    # ================================
    def get_trains(self) -> Result:
        return self.trains.get_trains()

    def search_trains(self, from_station: str, to_station: str) -> Result:
        return self.trains.search_trains(from_station, to_station)

    def get_train_by_number(self, train_number: str) -> Result:
        return self.trains.get_train_by_number(train_number)

    def create_train(self, train_number: str, train_name: str, type: Optional[str],
                     route: str, status: Optional[str]) -> Result:
        return self.trains.create_train(train_number, train_name, type, route, status)

    def update_train(self, train: Train) -> Result:
        return self.trains.update_train(train)

    def delete_train(self, train) -> Result:
        return self.trains.delete_train(train)

    def get_schedules(self) -> Result:
        return self.trains.get_schedules()

    def get_schedule_for_train(self, train_number: str) -> Result:
        return self.trains.get_schedule_for_train(train_number)

    def create_schedule(self, train_number: str, train_name: str, departure_time: Optional[str],
                        arrival_time: Optional[str], route: str, days: Optional[str],
                        status: Optional[str]) -> Result:
        return self.trains.create_schedule(
            train_number, train_name, departure_time, arrival_time, route, days, status
        )

    def update_schedule(self, schedule: Schedule) -> Result:
        return self.trains.update_schedule(schedule)

    def remove_schedule(self, schedule) -> Result:
        return self.trains.remove_schedule(schedule)

    def get_schedule_stations(self) -> Result:
        return self.trains.get_schedule_stations()

    def filter_schedules(self, query: Optional[str] = None, origin: Optional[str] = None,
                         destination: Optional[str] = None) -> Result:
        return self.trains.filter_schedules(
            ScheduleFilter(query=query, origin=origin, destination=destination)
        )

    # ================================
    # Bookings & Payments
    # ================================
    def book_ticket(self, user: User, train: Train, from_station: str, to_station: str,
                    travel_date: date, seats: int, seat_class: Optional[str],
                    total_amount: float) -> Result:
        return self.bookings.book_ticket(
            user, train, from_station, to_station, travel_date, seats, seat_class, total_amount
        )

    def process_payment(self, booking_id: str, payment_method: str) -> Result:
        return self.bookings.process_payment(booking_id, payment_method)

    def get_all_bookings(self) -> Result:
        return self.bookings.get_all_bookings()

    def get_booking_by_id(self, booking_id: str) -> Result:
        return self.bookings.get_booking_by_id(booking_id)

    def get_bookings_for_user(self, user_id: str) -> Result:
        return self.bookings.get_bookings_for_user(user_id)

    def get_pending_payments_for_user(self, user_id: str) -> Result:
        return self.bookings.get_pending_payments_for_user(user_id)

    def get_paid_bookings_for_user(self, user_id: str) -> Result:
        return self.bookings.get_paid_bookings_for_user(user_id)

    def get_payment_summary(self, user_id: str, today: Optional[date] = None) -> Result:
        return self.bookings.get_payment_summary(user_id, today)
