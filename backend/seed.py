from datetime import UTC, datetime, timedelta

from errors import ScheduleError
from service import ScheduleService
from store import get_store


def seed_schedules():
    """Seed the schedule document with sample appointments."""
    store = get_store()
    if store.load():
        print("Schedules already exist, skipping seed.")
        return

    service = ScheduleService(store)
    start = datetime.now(UTC).replace(hour=10, minute=0, second=0, microsecond=0)

    # Sample data, one per day starting next week
    sample_descriptions = [
        "Tea at the garden",
        "Walk along the river",
        "Lunch at the market",
        "Museum visit",
    ]

    created = 0
    for offset, description in enumerate(sample_descriptions, start=7):
        date = (start + timedelta(days=offset)).isoformat()
        try:
            service.create_schedule(date, description)
            created += 1
        except ScheduleError as e:
            print(f"Skipped {date}: {e.message}")

    print(f"Seeded {store.path} with {created} sample schedules.")


if __name__ == "__main__":
    seed_schedules()
