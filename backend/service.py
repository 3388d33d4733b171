import logging
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from errors import DuplicateDate, InvalidDate, MissingField, NotFound, PastDate
from models import Schedule, parse_instant, to_iso
from store import ScheduleStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ScheduleService:
    """Validates schedule requests and applies them to the store."""

    def __init__(self, store: ScheduleStore, now: Callable[[], datetime] = utc_now):
        self.store = store
        self.now = now

    def list_schedules(self) -> list[Schedule]:
        return self.store.load()

    def create_schedule(self, date: str | None, description: str | None) -> Schedule:
        """Book a future calendar day.

        Checks run in order and stop at the first failure: date present, date
        parseable, date in the future, description present, day still free.
        Nothing is written unless every check passes.
        """
        if date is None or not str(date).strip():
            raise MissingField("Date is required")

        try:
            when = parse_instant(str(date))
        except ValueError as e:
            raise InvalidDate("Date must be an ISO-8601 timestamp") from e

        now = self.now()
        if when <= now:
            logger.info(f"Rejected schedule for past date {to_iso(when)}")
            raise PastDate("Date must be in the future")

        if description is None or not description.strip():
            raise MissingField("Description is required")

        with self.store.transaction():
            schedules = self.store.load()

            day = when.date()
            if any(s.calendar_day == day for s in schedules):
                logger.info(f"Rejected schedule for already booked day {day.isoformat()}")
                raise DuplicateDate("Date already scheduled")

            taken_ids = {s.id for s in schedules}
            new_id = str(uuid.uuid4())
            while new_id in taken_ids:
                new_id = str(uuid.uuid4())

            schedule = Schedule(
                id=new_id,
                date=to_iso(when),
                description=description.strip(),
                createdAt=to_iso(now),
            )
            self.store.replace(schedules + [schedule])

        logger.info(f"Created schedule {schedule.id} for {schedule.date}")
        return schedule

    def delete_schedule(self, schedule_id: str) -> None:
        if not self.store.remove(schedule_id):
            raise NotFound("Schedule not found")
        logger.info(f"Deleted schedule {schedule_id}")
