from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime, date
from enum import Enum

class BookingStatus(str, Enum):
    """Booking status enumeration"""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"

class PaymentStatus(str, Enum):
    """Payment status enumeration"""
    PENDING = "Pending"
    PAID = "Paid"

class PaymentMethod(str, Enum):
    """Payment methods offered at checkout"""
    CASH_ON_DELIVERY = "Cash on Delivery"
    CARD = "Card"

class Booking(BaseModel):
    """A booking; the id doubles as the PNR shown to passengers"""
    id: str
    user_id: str
    train_id: str
    train_number: str
    train_name: str
    from_station: str
    to_station: str
    travel_date: date
    number_of_seats: int
    seat_class: Optional[str] = None
    total_amount: float
    status: str = BookingStatus.PENDING.value
    booking_date_time: datetime = Field(default_factory=datetime.now)
    payment_method: Optional[str] = ""
    payment_status: Optional[str] = PaymentStatus.PENDING.value

    class Config:
        from_attributes = True

    @field_validator("payment_method", mode="before")
    @classmethod
    def default_payment_method(cls, v):
        return "" if v is None else v

    @field_validator("payment_status", mode="before")
    @classmethod
    def default_payment_status(cls, v):
        return PaymentStatus.PENDING.value if v is None else v

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID.value

class PaymentSummary(BaseModel):
    """Aggregates over a passenger's paid bookings"""
    total_spent: float = 0.0
    total_trips: int = 0
    this_month: int = 0
