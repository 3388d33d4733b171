import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from errors import ScheduleError
from models import Schedule
from schemas import DateRange, DebugResponse, DeleteResponse, ErrorDetail, ScheduleCreate
from service import ScheduleService
from store import ScheduleStore, get_schedule_store, get_store

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def get_service(store: ScheduleStore = Depends(get_schedule_store)) -> ScheduleService:
    return ScheduleService(store)


def to_http_error(e: ScheduleError) -> HTTPException:
    """Map a schedule error kind onto its status code and a displayable message."""
    detail = ErrorDetail(code=e.code, message=e.message)
    return HTTPException(status_code=e.status_code, detail=detail.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where schedules are kept on startup."""
    store = get_store()
    logger.info(f"Schedule store at {store.path} ({len(store.load())} schedules)")
    yield


# Create FastAPI app
app = FastAPI(title="Appointment Scheduler API", version="1.0.0", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Calendar UI is served separately
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/schedules", response_model=list[Schedule])
def list_schedules(service: ScheduleService = Depends(get_service)):
    """Get all scheduled dates in booking order."""
    return service.list_schedules()


@app.post("/schedules", response_model=Schedule, status_code=201)
def create_schedule(request: ScheduleCreate, service: ScheduleService = Depends(get_service)):
    """Book a free future date."""
    logger.info(f"Schedule request for date: {request.date}")
    try:
        return service.create_schedule(request.date, request.description)
    except ScheduleError as e:
        if e.status_code >= 500:
            logger.error(f"Error creating schedule: {e.message}")
        raise to_http_error(e) from e


@app.delete("/schedules/{schedule_id}", response_model=DeleteResponse)
def delete_schedule(schedule_id: str, service: ScheduleService = Depends(get_service)):
    """Remove a scheduled date."""
    try:
        service.delete_schedule(schedule_id)
    except ScheduleError as e:
        if e.status_code >= 500:
            logger.error(f"Error deleting schedule {schedule_id}: {e.message}")
        raise to_http_error(e) from e
    return DeleteResponse(success=True)


@app.get("/admin/debug", response_model=DebugResponse)
def debug_store(store: ScheduleStore = Depends(get_schedule_store)):
    """Debug endpoint to check the backing document."""
    schedules = store.load()
    dates = [s.date for s in schedules]
    return DebugResponse(
        schedules_path=str(store.path),
        document_exists=store.path.exists(),
        total_schedules=len(schedules),
        date_range=DateRange(
            earliest=min(dates) if dates else None,
            latest=max(dates) if dates else None,
        ),
        sample_schedules=[s.model_dump() for s in schedules[-10:]],
    )


@app.get("/")
def root():
    """Root endpoint."""
    return {"message": "Appointment Scheduler API", "docs": "/docs"}
