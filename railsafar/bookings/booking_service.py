import logging
from datetime import date, datetime
from typing import Optional

from railsafar.store import Store
from railsafar.results import Result, storage_guard
from railsafar.auth.schemas import User
from railsafar.trains.schemas import Train
from railsafar.bookings.schemas import Booking, BookingStatus, PaymentStatus, PaymentSummary

logger = logging.getLogger(__name__)

class BookingService:
    """
    Service for the booking and payment lifecycle.

    A booking starts as Pending/Pending and moves to Confirmed/Paid in a
    single step when it is paid. There is no seat inventory: the seat count
    is a quantity label and bookings never fail for lack of capacity.
    Cancellation and refunds are not supported.
    """

    def __init__(self, store: Store):
        self.store = store

    @storage_guard("adding booking")
    def book_ticket(self, user: User, train: Train, from_station: str, to_station: str,
                    travel_date: date, seats: int, seat_class: Optional[str],
                    total_amount: float) -> Result:
        """Create a pending booking for ``user`` on ``train``"""
        with self.store.lock:
            booking = Booking(
                id=self.store.next_booking_id(),
                user_id=user.id,
                train_id=train.id,
                train_number=train.train_number,
                train_name=train.train_name,
                from_station=from_station,
                to_station=to_station,
                travel_date=travel_date,
                number_of_seats=seats,
                seat_class=seat_class,
                total_amount=total_amount,
                status=BookingStatus.PENDING.value,
                booking_date_time=datetime.now(),
                payment_method="",
                payment_status=PaymentStatus.PENDING.value
            )
            self.store.add_booking(booking)

        logger.info("Booking %s created for user %s on train %s", booking.id, user.id, train.train_number)
        return Result.success(booking)

    @storage_guard("processing payment")
    def process_payment(self, booking_id: str, payment_method: str) -> Result:
        """
        Mark a booking paid and confirmed.

        Paying an already paid booking succeeds again and simply records the
        new payment method; nothing is rolled back.
        """
        with self.store.lock:
            booking = self.store.find_booking_by_id(booking_id)
            if not booking:
                logger.warning("Payment rejected, booking %s not found", booking_id)
                return Result.not_found(f"Booking {booking_id} not found")

            booking.payment_method = payment_method
            booking.payment_status = PaymentStatus.PAID.value
            booking.status = BookingStatus.CONFIRMED.value

            if not self.store.update_booking(booking):
                return Result.not_found(f"Booking {booking_id} not found")

        logger.info("Payment for booking %s received via %s", booking_id, payment_method)
        return Result.success(booking)

    @storage_guard("getting bookings", default=list)
    def get_all_bookings(self) -> Result:
        return Result.success(self.store.list_bookings())

    @storage_guard("finding booking")
    def get_booking_by_id(self, booking_id: str) -> Result:
        booking = self.store.find_booking_by_id(booking_id)
        if not booking:
            return Result.not_found(f"Booking {booking_id} not found")
        return Result.success(booking)

    @storage_guard("getting bookings", default=list)
    def get_bookings_for_user(self, user_id: str) -> Result:
        return Result.success([
            booking for booking in self.store.list_bookings()
            if booking.user_id == user_id
        ])

    @storage_guard("getting pending payments", default=list)
    def get_pending_payments_for_user(self, user_id: str) -> Result:
        return Result.success([
            booking for booking in self.store.list_bookings()
            if booking.user_id == user_id
            and booking.payment_status == PaymentStatus.PENDING.value
        ])

    @storage_guard("getting payment history", default=list)
    def get_paid_bookings_for_user(self, user_id: str) -> Result:
        return Result.success([
            booking for booking in self.store.list_bookings()
            if booking.user_id == user_id and booking.is_paid
        ])

    @storage_guard("summarising payments", default=PaymentSummary)
    def get_payment_summary(self, user_id: str, today: Optional[date] = None) -> Result:
        """Total spent, paid trips and paid trips booked this calendar month"""
        today = today or date.today()
        paid = [
            booking for booking in self.store.list_bookings()
            if booking.user_id == user_id and booking.is_paid
        ]

        this_month = sum(
            1 for booking in paid
            if booking.booking_date_time.year == today.year
            and booking.booking_date_time.month == today.month
        )

        return Result.success(PaymentSummary(
            total_spent=sum(booking.total_amount for booking in paid),
            total_trips=len(paid),
            this_month=this_month
        ))
