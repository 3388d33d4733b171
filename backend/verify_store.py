#!/usr/bin/env python3
"""
Script to verify the schedule document is consistent.
Run this after editing the file by hand or restoring a backup.
"""
import logging
import os
import sys
from collections import Counter
from datetime import UTC, datetime

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from store import get_store

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_store(path=None) -> dict:
    """Report duplicate ids, double-booked days and past appointments."""
    store = get_store(path)
    schedules = store.load()
    logger.info(f"Total schedules in {store.path}: {len(schedules)}")

    id_counts = Counter(s.id for s in schedules)
    duplicate_ids = sorted(i for i, n in id_counts.items() if n > 1)

    day_counts = Counter(s.calendar_day for s in schedules)
    duplicate_days = sorted(d.isoformat() for d, n in day_counts.items() if n > 1)

    today = datetime.now(UTC).date()
    past = [s.id for s in schedules if s.calendar_day < today]

    if duplicate_ids:
        logger.warning(f"Found {len(duplicate_ids)} duplicate ids: {duplicate_ids}")
    if duplicate_days:
        logger.warning(f"Found {len(duplicate_days)} double-booked days: {duplicate_days}")
    if past:
        logger.info(f"{len(past)} schedules are in the past")
    if not duplicate_ids and not duplicate_days:
        logger.info("No duplicate ids or days found")

    return {
        "total": len(schedules),
        "duplicate_ids": duplicate_ids,
        "duplicate_days": duplicate_days,
        "past": past,
    }


if __name__ == "__main__":
    result = check_store(sys.argv[1] if len(sys.argv) > 1 else None)
    sys.exit(1 if result["duplicate_ids"] or result["duplicate_days"] else 0)
