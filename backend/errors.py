"""Error kinds raised by the schedule store and service.

Each kind carries the HTTP status it maps to so the API layer can translate
it in one place.
"""


class ScheduleError(Exception):
    code = "ScheduleError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingField(ScheduleError):
    code = "MissingField"
    status_code = 400


class InvalidDate(ScheduleError):
    code = "InvalidDate"
    status_code = 400


class PastDate(ScheduleError):
    code = "PastDate"
    status_code = 400


class DuplicateDate(ScheduleError):
    code = "DuplicateDate"
    status_code = 409


class NotFound(ScheduleError):
    code = "NotFound"
    status_code = 404


class StorageError(ScheduleError):
    code = "StorageError"
    status_code = 500
