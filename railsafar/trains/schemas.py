from pydantic import BaseModel
from typing import Optional
from enum import Enum

class TrainStatus(str, Enum):
    """Operational status of a train"""
    ON_TIME = "On-time"
    DELAYED = "Delayed"
    CANCELLED = "Cancelled"

class TrainBase(BaseModel):
    train_number: str
    train_name: str
    type: Optional[str] = None
    route: Optional[str] = ""
    status: Optional[str] = TrainStatus.ON_TIME.value

class Train(TrainBase):
    id: str

    class Config:
        from_attributes = True

class ScheduleBase(BaseModel):
    train_number: str
    train_name: str
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    route: Optional[str] = ""
    days: Optional[str] = None
    status: Optional[str] = "Active"

class Schedule(ScheduleBase):
    id: str

    class Config:
        from_attributes = True

class ScheduleFilter(BaseModel):
    """Schedule browsing filters; None means no filter"""
    query: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
