from sqlalchemy import Column, Integer, String, Date, DateTime, Float, ForeignKey
from railsafar.database import Base

# ================================
# Users
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    phone = Column(String)
    role = Column(String, nullable=False)
    password = Column(String, nullable=False)
    cnic = Column(String)
    date_of_birth = Column(Date)
    gender = Column(String)
    address = Column(String)
    city = Column(String)
    postal_code = Column(String)

# ================================
# Trains & Schedules
# ================================
class Train(Base):
    __tablename__ = "trains"

    id = Column(String, primary_key=True)
    train_number = Column(String, unique=True, nullable=False, index=True)
    train_name = Column(String, nullable=False)
    type = Column(String)
    route = Column(String)
    status = Column(String)

class Schedule(Base):
    __tablename__ = "schedules"

    id = Column(String, primary_key=True)
    train_number = Column(String, ForeignKey("trains.train_number"), nullable=False, index=True)
    train_name = Column(String, nullable=False)
    departure_time = Column(String)
    arrival_time = Column(String)
    route = Column(String)
    days = Column(String)
    status = Column(String)

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    train_id = Column(String, ForeignKey("trains.id"), nullable=False)
    # Captured at booking time, not re-synced when the train changes
    train_number = Column(String, nullable=False)
    train_name = Column(String, nullable=False)
    from_station = Column(String, nullable=False)
    to_station = Column(String, nullable=False)
    travel_date = Column(Date, nullable=False)
    number_of_seats = Column(Integer, nullable=False)
    seat_class = Column(String)
    total_amount = Column(Float, nullable=False)
    status = Column(String, nullable=False)
    booking_date_time = Column(DateTime, nullable=False)
    payment_method = Column(String)
    payment_status = Column(String)
