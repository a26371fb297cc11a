"""Rail Safar booking core: persistence and booking business rules."""

from railsafar.config import Settings, get_settings, configure_logging
from railsafar.results import Result, ResultStatus
from railsafar.store import Store
from railsafar.service import RailwayService

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "Result",
    "ResultStatus",
    "Store",
    "RailwayService",
]
