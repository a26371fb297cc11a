import logging
from typing import Optional, Union

from railsafar.store import Store
from railsafar.results import Result, storage_guard
from railsafar.trains.schemas import Train, Schedule, ScheduleFilter
from railsafar.trains.routes import route_contains, collect_stations, matches_endpoints

logger = logging.getLogger(__name__)

class TrainService:
    """Train search plus the admin train and schedule operations"""

    def __init__(self, store: Store):
        self.store = store

    # Trains
    @storage_guard("getting trains", default=list)
    def get_trains(self) -> Result:
        return Result.success(self.store.list_trains())

    @storage_guard("searching trains", default=list)
    def search_trains(self, from_station: str, to_station: str) -> Result:
        """Trains whose route text mentions both stations, in any order"""
        trains = [
            train for train in self.store.list_trains()
            if route_contains(train.route, from_station, to_station)
        ]
        return Result.success(trains)

    @storage_guard("finding train by number")
    def get_train_by_number(self, train_number: str) -> Result:
        train = self.store.find_train_by_number(train_number)
        if not train:
            return Result.not_found(f"Train {train_number} not found")
        return Result.success(train)

    @storage_guard("adding train")
    def create_train(self, train_number: str, train_name: str, type: Optional[str],
                     route: str, status: Optional[str]) -> Result:
        with self.store.lock:
            train = Train(
                id=self.store.next_train_id(),
                train_number=train_number,
                train_name=train_name,
                type=type,
                route=route,
                status=status
            )
            self.store.add_train(train)
        logger.info("Created train %s (%s)", train.train_number, train.id)
        return Result.success(train)

    @storage_guard("updating train")
    def update_train(self, train: Train) -> Result:
        with self.store.lock:
            if not self.store.update_train(train):
                return Result.not_found(f"Train {train.id} not found")
        return Result.success(train)

    @storage_guard("removing train")
    def delete_train(self, train: Union[Train, str]) -> Result:
        train_id = train.id if isinstance(train, Train) else train
        with self.store.lock:
            removed = self.store.remove_train(train_id)
        if not removed:
            return Result.not_found(f"Train {train_id} not found", False)
        logger.info("Removed train %s", train_id)
        return Result.success(True)

    # Schedules
    @storage_guard("getting schedules", default=list)
    def get_schedules(self) -> Result:
        return Result.success(self.store.list_schedules())

    @storage_guard("finding schedule")
    def get_schedule_for_train(self, train_number: str) -> Result:
        schedule = self.store.find_schedule_by_train_number(train_number)
        if not schedule:
            return Result.not_found(f"No schedule for train {train_number}")
        return Result.success(schedule)

    @storage_guard("adding schedule")
    def create_schedule(self, train_number: str, train_name: str, departure_time: Optional[str],
                        arrival_time: Optional[str], route: str, days: Optional[str],
                        status: Optional[str]) -> Result:
        with self.store.lock:
            schedule = Schedule(
                id=self.store.next_schedule_id(),
                train_number=train_number,
                train_name=train_name,
                departure_time=departure_time,
                arrival_time=arrival_time,
                route=route,
                days=days,
                status=status
            )
            self.store.add_schedule(schedule)
        logger.info("Created schedule %s for train %s", schedule.id, schedule.train_number)
        return Result.success(schedule)

    @storage_guard("updating schedule")
    def update_schedule(self, schedule: Schedule) -> Result:
        with self.store.lock:
            if not self.store.update_schedule(schedule):
                return Result.not_found(f"Schedule {schedule.id} not found")
        return Result.success(schedule)

    @storage_guard("removing schedule")
    def remove_schedule(self, schedule: Union[Schedule, str]) -> Result:
        schedule_id = schedule.id if isinstance(schedule, Schedule) else schedule
        with self.store.lock:
            removed = self.store.remove_schedule(schedule_id)
        if not removed:
            return Result.not_found(f"Schedule {schedule_id} not found", False)
        logger.info("Removed schedule %s", schedule_id)
        return Result.success(True)

    @storage_guard("listing schedule stations", default=list)
    def get_schedule_stations(self) -> Result:
        """Distinct route endpoints across all schedules, sorted"""
        return Result.success(
            collect_stations(schedule.route for schedule in self.store.list_schedules())
        )

    @storage_guard("filtering schedules", default=list)
    def filter_schedules(self, filters: Optional[ScheduleFilter] = None) -> Result:
        """
        Narrow the schedule list the way the timetable view does: ``query``
        is a case-insensitive substring of train number, train name or
        route; ``origin``/``destination`` must equal the route endpoints.
        """
        filters = filters or ScheduleFilter()
        query = (filters.query or "").lower()

        schedules = []
        for schedule in self.store.list_schedules():
            if query and not any(
                query in (field or "").lower()
                for field in (schedule.train_number, schedule.train_name, schedule.route)
            ):
                continue
            if not matches_endpoints(schedule.route, filters.origin, filters.destination):
                continue
            schedules.append(schedule)

        return Result.success(schedules)
