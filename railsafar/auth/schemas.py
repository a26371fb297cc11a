from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import date
from enum import Enum

class UserRole(str, Enum):
    """User role enumeration"""
    ADMIN = "admin"
    PASSENGER = "passenger"

class UserBase(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    role: str = UserRole.PASSENGER.value
    # Stored and compared in plaintext, see railsafar.auth
    password: str

class UserCreate(UserBase):
    pass

class User(UserBase):
    id: str
    cnic: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None

    class Config:
        from_attributes = True
