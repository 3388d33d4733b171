from pydantic import BaseModel


class ScheduleCreate(BaseModel):
    # Optional so that a missing field is reported as MissingField, not a 422
    date: str | None = None
    description: str | None = None


class DeleteResponse(BaseModel):
    success: bool


class ErrorDetail(BaseModel):
    code: str
    message: str


class DateRange(BaseModel):
    earliest: str | None = None
    latest: str | None = None


class DebugResponse(BaseModel):
    schedules_path: str
    document_exists: bool
    total_schedules: int
    date_range: DateRange
    sample_schedules: list[dict]
