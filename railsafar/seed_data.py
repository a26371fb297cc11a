import logging
from datetime import date, datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from railsafar.models import User, Train, Schedule, Booking

logger = logging.getLogger(__name__)


def _table_is_empty(db: Session, model) -> bool:
    return db.query(func.count(model.id)).scalar() == 0


def seed_users(db: Session):
    db.add_all([
        User(
            id="100", name="System Admin", email="admin@railsafar.com",
            phone="0300-0000000", role="admin", password="admin123",
            cnic="35202-1234567-1", date_of_birth=date(1985, 5, 12), gender="Male",
            address="HQ, Rail Safar Building", city="Karachi", postal_code="75500"
        ),
        User(
            id="101", name="Sarah Khan", email="sarah.khan@example.com",
            phone="0300-1111111", role="passenger", password="password1",
            cnic="35201-9876543-2", date_of_birth=date(1995, 8, 20), gender="Female",
            address="123 Main Street", city="Lahore", postal_code="54000"
        ),
    ])


def seed_trains(db: Session):
    trains = [
        ("1", "1UP", "Karachi Express", "Express", "Karachi - Lahore", "On-time"),
        ("2", "2DN", "Lahore Express", "Express", "Lahore - Karachi", "Delayed"),
        ("3", "3UP", "Green Line", "Passenger", "Islamabad - Multan", "On-time"),
        ("4", "4DN", "Freight Express", "Freight", "Port Qasim - Faisalabad", "Cancelled"),
        ("5", "5UP", "Business Express", "Express", "Rawalpindi - Quetta", "On-time"),
        ("6", "6DN", "Peshawar Mail", "Passenger", "Peshawar - Karachi", "Delayed"),
    ]
    db.add_all([
        Train(id=id, train_number=number, train_name=name, type=type, route=route, status=status)
        for id, number, name, type, route, status in trains
    ])


def seed_schedules(db: Session):
    schedules = [
        ("1", "1UP", "Karachi Express", "08:00 AM", "08:00 PM", "Karachi - Lahore", "Daily"),
        ("2", "2DN", "Lahore Express", "09:00 AM", "09:00 PM", "Lahore - Karachi", "Daily"),
        ("3", "3UP", "Green Line", "10:30 AM", "06:30 PM", "Islamabad - Multan", "Mon-Fri"),
        ("4", "5UP", "Business Express", "07:00 AM", "05:00 PM", "Rawalpindi - Quetta", "Daily"),
        ("5", "6DN", "Peshawar Mail", "11:00 AM", "11:00 PM", "Peshawar - Karachi", "Daily"),
    ]
    db.add_all([
        Schedule(
            id=id, train_number=number, train_name=name, departure_time=departs,
            arrival_time=arrives, route=route, days=days, status="Active"
        )
        for id, number, name, departs, arrives, route, days in schedules
    ])


def seed_bookings(db: Session):
    # Sample paid booking for the sample passenger
    db.add(Booking(
        id="400", user_id="101", train_id="1", train_number="1UP",
        train_name="Karachi Express", from_station="Karachi", to_station="Lahore",
        travel_date=date.today() + timedelta(days=2), number_of_seats=2,
        seat_class="Economy", total_amount=5000.0, status="Confirmed",
        booking_date_time=datetime.now() - timedelta(days=1),
        payment_method="Card", payment_status="Paid"
    ))


SEEDERS = [
    (User, seed_users),
    (Train, seed_trains),
    (Schedule, seed_schedules),
    (Booking, seed_bookings),
]


def create_seed_data(db: Session) -> list:
    """Seed each table that is still empty; returns the seeded table names"""
    seeded = []
    for model, seeder in SEEDERS:
        if not _table_is_empty(db, model):
            continue
        logger.info("Seeding %s...", model.__tablename__)
        seeder(db)
        db.flush()
        seeded.append(model.__tablename__)
    return seeded
