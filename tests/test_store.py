"""
Unit tests for the Store: schema creation, seeding, CRUD and id allocation.
"""

import pytest
from datetime import date, datetime
from sqlalchemy.exc import IntegrityError

from railsafar.store import Store
from railsafar.auth.schemas import User
from railsafar.trains.schemas import Train, Schedule
from railsafar.bookings.schemas import Booking


def make_train(id, number="9UP", route="Karachi - Lahore"):
    return Train(id=id, train_number=number, train_name="Test Express",
                 type="Express", route=route, status="On-time")


class TestInitialize:
    """Test schema creation and the one-time seed."""

    def test_seed_populates_reference_data(self, store):
        """Test seeded row counts for every table."""
        assert len(store.list_users()) == 2
        assert len(store.list_trains()) == 6
        assert len(store.list_schedules()) == 5
        assert len(store.list_bookings()) == 1

    def test_seed_admin_and_passenger(self, store):
        """Test the seeded accounts."""
        admin = store.find_user_by_id("100")
        passenger = store.find_user_by_id("101")

        assert admin.email == "admin@railsafar.com"
        assert admin.role == "admin"
        assert admin.date_of_birth == date(1985, 5, 12)
        assert passenger.email == "sarah.khan@example.com"
        assert passenger.role == "passenger"
        assert passenger.city == "Lahore"

    def test_seed_booking_is_paid(self, store):
        """Test the seeded sample booking."""
        booking = store.find_booking_by_id("400")

        assert booking.user_id == "101"
        assert booking.train_number == "1UP"
        assert booking.status == "Confirmed"
        assert booking.payment_status == "Paid"
        assert booking.payment_method == "Card"
        assert booking.number_of_seats == 2
        assert booking.total_amount == 5000.0

    def test_initialize_twice_does_not_reseed(self, store):
        """Test that seeding is a one-time bootstrap."""
        assert store.initialize(seed=True) == []
        assert len(store.list_users()) == 2
        assert len(store.list_trains()) == 6

    def test_seed_only_fills_empty_tables(self, empty_store):
        """Test that a table with rows is left alone while empty ones are seeded."""
        empty_store.add_train(make_train("50"))

        seeded = empty_store.initialize(seed=True)

        assert "trains" not in seeded
        assert "users" in seeded
        assert [t.id for t in empty_store.list_trains()] == ["50"]

    def test_initialize_without_seed(self, empty_store):
        """Test that an unseeded store has empty tables."""
        assert empty_store.list_users() == []
        assert empty_store.list_bookings() == []

    def test_context_manager_closes(self):
        """Test that the store can be used as a context manager."""
        with Store("sqlite://") as store:
            store.initialize(seed=False)
            assert store.list_trains() == []


class TestNextId:
    """Test max-based id allocation."""

    def test_empty_table_starts_at_one(self, empty_store):
        """Test next id on an empty table."""
        assert empty_store.next_user_id() == "1"
        assert empty_store.next_train_id() == "1"
        assert empty_store.next_schedule_id() == "1"
        assert empty_store.next_booking_id() == "1"

    def test_next_id_is_max_based(self, empty_store):
        """Test that gaps are not reused: ids {1, 3} give 4."""
        empty_store.add_train(make_train("1", "1A"))
        empty_store.add_train(make_train("3", "3A"))

        assert empty_store.next_train_id() == "4"

    def test_next_id_compares_numerically(self, empty_store):
        """Test that "10" is larger than "9"."""
        empty_store.add_train(make_train("9", "9A"))
        empty_store.add_train(make_train("10", "10A"))

        assert empty_store.next_id("trains") == "11"

    def test_seeded_tables(self, store):
        """Test next ids after seeding."""
        assert store.next_user_id() == "102"
        assert store.next_train_id() == "7"
        assert store.next_schedule_id() == "6"
        assert store.next_booking_id() == "401"

    def test_unknown_table(self, store):
        """Test that only the four entity tables are accepted."""
        with pytest.raises(KeyError):
            store.next_id("stations")


class TestUsers:
    """Test user persistence."""

    def test_find_by_email_ignores_case(self, store):
        """Test case-insensitive email lookup."""
        user = store.find_user_by_email("SARAH.KHAN@Example.COM")
        assert user is not None
        assert user.id == "101"

    def test_find_missing_returns_none(self, store):
        """Test that absence is not an error."""
        assert store.find_user_by_email("nobody@example.com") is None
        assert store.find_user_by_id("999") is None

    def test_email_exists_excluding_owner(self, store):
        """Test the uniqueness check used by profile updates."""
        assert store.email_exists("sarah.khan@example.com")
        assert store.email_exists("Sarah.Khan@example.com", "100")
        assert not store.email_exists("sarah.khan@example.com", "101")
        assert not store.email_exists("free@example.com")

    def test_duplicate_email_raises(self, store):
        """Test that the unique constraint surfaces as a storage failure."""
        duplicate = User(id="500", name="Copy", email="admin@railsafar.com",
                         role="passenger", password="x")
        with pytest.raises(IntegrityError):
            store.add_user(duplicate)

    def test_update_replaces_row(self, store):
        """Test full-row update."""
        user = store.find_user_by_id("101")
        changed = user.model_copy(update={"city": "Karachi", "phone": "0300-2222222"})

        assert store.update_user(changed) is True

        stored = store.find_user_by_id("101")
        assert stored.city == "Karachi"
        assert stored.phone == "0300-2222222"

    def test_update_missing_is_noop(self, store):
        """Test that updating an unknown id reports False without raising."""
        ghost = User(id="999", name="Ghost", email="ghost@example.com",
                     role="passenger", password="x")
        assert store.update_user(ghost) is False
        assert store.find_user_by_id("999") is None


class TestTrainsAndSchedules:
    """Test train and schedule persistence."""

    def test_find_train_by_number(self, store):
        """Test natural-key lookup."""
        train = store.find_train_by_number("4DN")
        assert train.train_name == "Freight Express"
        assert train.status == "Cancelled"

    def test_duplicate_train_number_raises(self, store):
        """Test the unique train number constraint."""
        with pytest.raises(IntegrityError):
            store.add_train(make_train("20", "1UP"))

    def test_duplicate_id_raises(self, store):
        """Test the primary key constraint."""
        with pytest.raises(IntegrityError):
            store.add_train(make_train("1", "NEW1"))

    def test_remove_train(self, store):
        """Test delete returns whether a row was removed."""
        assert store.remove_train("4") is True
        assert store.find_train_by_id("4") is None
        assert store.remove_train("4") is False

    def test_update_train(self, store):
        """Test full-row train update."""
        train = store.find_train_by_id("2")
        train.status = "On-time"

        assert store.update_train(train) is True
        assert store.find_train_by_id("2").status == "On-time"

    def test_find_schedule_by_train_number(self, store):
        """Test schedule lookup by train number."""
        schedule = store.find_schedule_by_train_number("3UP")
        assert schedule.days == "Mon-Fri"
        assert schedule.departure_time == "10:30 AM"
        assert store.find_schedule_by_train_number("4DN") is None

    def test_schedule_crud(self, store):
        """Test adding, updating and removing a schedule."""
        schedule = Schedule(id="6", train_number="4DN", train_name="Freight Express",
                            departure_time="01:00 AM", arrival_time="03:00 PM",
                            route="Port Qasim - Faisalabad", days="Sun", status="Active")
        store.add_schedule(schedule)
        assert store.find_schedule_by_id("6").days == "Sun"

        schedule.days = "Sat-Sun"
        assert store.update_schedule(schedule) is True
        assert store.find_schedule_by_id("6").days == "Sat-Sun"

        assert store.remove_schedule("6") is True
        assert store.find_schedule_by_id("6") is None


class TestBookings:
    """Test booking persistence."""

    def test_add_and_find_booking(self, store):
        """Test that booking fields survive a round trip through the table."""
        booked_at = datetime(2025, 3, 1, 9, 30)
        booking = Booking(
            id="401", user_id="101", train_id="3", train_number="3UP",
            train_name="Green Line", from_station="Islamabad", to_station="Multan",
            travel_date=date(2025, 3, 5), number_of_seats=1, seat_class="Business",
            total_amount=3200.0, booking_date_time=booked_at
        )
        store.add_booking(booking)

        stored = store.find_booking_by_id("401")
        assert stored.travel_date == date(2025, 3, 5)
        assert stored.booking_date_time == booked_at
        assert stored.status == "Pending"
        assert stored.payment_status == "Pending"
        assert stored.payment_method == ""

    def test_update_missing_booking(self, store):
        """Test that updating an unknown booking is a no-op."""
        booking = store.find_booking_by_id("400").model_copy(update={"id": "999"})
        assert store.update_booking(booking) is False
