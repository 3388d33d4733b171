from datetime import UTC, date, datetime

from pydantic import field_validator
from sqlmodel import Field, SQLModel


def to_iso(dt: datetime) -> str:
    """Canonical UTC timestamp, e.g. 2099-01-01T10:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps and bare dates are taken as UTC.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class Schedule(SQLModel):
    id: str = Field(min_length=1)
    date: str  # Canonical UTC ISO-8601
    description: str = Field(min_length=1)
    createdAt: str  # Canonical UTC ISO-8601

    @field_validator("date", "createdAt")
    @classmethod
    def validate_instant(cls, v):
        # Raises ValueError for anything that is not an ISO-8601 timestamp
        parse_instant(v)
        return v

    @property
    def calendar_day(self) -> date:
        return parse_instant(self.date).date()
