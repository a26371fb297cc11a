"""
Booking & Payment Module

- booking_service.py: ticket booking, payment processing and per-user history
- schemas.py: booking model, status enumerations and the payment summary
"""

from .schemas import BookingStatus, PaymentStatus, PaymentMethod, Booking, PaymentSummary

__all__ = [
    "BookingStatus",
    "PaymentStatus",
    "PaymentMethod",
    "Booking",
    "PaymentSummary",
]
