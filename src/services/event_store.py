"""
In-memory event store.

Holds a user's period boundary events and daily logs and applies the same
write contract as the hosted database: events are appended with a generated
id, daily logs are upserted so there is at most one per date. Reads return
models ready for the cycle calculations.

Typical usage:
    store = InMemoryEventStore(user_id="user-1")
    store.add_event(date(2024, 1, 1), EventKind.PERIOD_START)
    store.upsert_daily_log(date(2024, 1, 2), mood=3, symptoms=["cramps"])
    stats = calculate_cycle_statistics(store.list_events())
"""
from typing import Any, Dict, List, Optional
from datetime import date
import uuid

from pydantic import ValidationError

from src.models.daily_log import DailyLog
from src.models.event import CycleEvent, EventKind
from src.services.exceptions import EntryNotFoundError
from src.utils.logging import logger, row_error_record

def event_from_row(row: Dict[str, Any]) -> CycleEvent:
    """
    Parse a stored cycle entry row into a CycleEvent.

    Args:
        row: Mapping with ``entry_date`` (YYYY-MM-DD), ``entry_type`` and
            optional ``notes``, ``id`` and ``user_id``

    Raises:
        pydantic.ValidationError: If the date or entry type is invalid
    """
    return CycleEvent(
        date=row["entry_date"],
        kind=row["entry_type"],
        notes=row.get("notes"),
        id=row.get("id"),
        user_id=row.get("user_id")
    )

def daily_log_from_row(row: Dict[str, Any]) -> DailyLog:
    """
    Parse a stored daily log row into a DailyLog.

    A null symptoms column becomes an empty list.
    """
    return DailyLog(
        date=row["log_date"],
        mood=row.get("mood"),
        energy=row.get("energy"),
        symptoms=row.get("symptoms") or [],
        notes=row.get("notes"),
        id=row.get("id"),
        user_id=row.get("user_id")
    )

class InMemoryEventStore:
    """Event and daily log storage for a single user."""

    def __init__(self, user_id: Optional[str] = None):
        """Initialize an empty store."""
        self.user_id = user_id
        self._events: List[CycleEvent] = []
        self._logs: Dict[date, DailyLog] = {}

    @classmethod
    def from_rows(
        cls,
        event_rows: List[Dict[str, Any]],
        log_rows: List[Dict[str, Any]],
        user_id: Optional[str] = None
    ) -> "InMemoryEventStore":
        """
        Load a store from database rows, keeping their ids.

        Raises:
            pydantic.ValidationError: If a row cannot be parsed
        """
        store = cls(user_id=user_id)
        for table, rows, parse in (
            ("cycle_entries", event_rows, event_from_row),
            ("daily_logs", log_rows, daily_log_from_row)
        ):
            for index, row in enumerate(rows):
                try:
                    record = parse(row)
                except ValidationError as e:
                    logger.warning(
                        "Failed to load stored row",
                        extra=row_error_record(e, table, index, row)
                    )
                    raise
                if isinstance(record, DailyLog):
                    store._logs[record.date] = record
                else:
                    store._events.append(record)
        return store

    def add_event(self, event_date: date, kind: EventKind, notes: Optional[str] = None) -> CycleEvent:
        """
        Record a period start or end.

        Same-day duplicates are kept. Empty notes are stored as None.

        Returns:
            The stored event with its generated id
        """
        event = CycleEvent(
            date=event_date,
            kind=kind,
            notes=notes or None,
            id=str(uuid.uuid4()),
            user_id=self.user_id
        )
        self._events.append(event)
        logger.info("Stored cycle event", extra={
            "event_id": event.id,
            "date": str(event.date),
            "kind": event.kind.value
        })
        return event

    def delete_event(self, event_id: str) -> None:
        """
        Delete an event by id.

        Raises:
            EntryNotFoundError: If no event has the id
        """
        for index, event in enumerate(self._events):
            if event.id == event_id:
                del self._events[index]
                logger.info("Deleted cycle event", extra={"event_id": event_id})
                return
        logger.warning("Cycle event not found", extra={"event_id": event_id})
        raise EntryNotFoundError(f"No cycle event with id {event_id}")

    def list_events(self) -> List[CycleEvent]:
        """All events ordered by date, insertion order within a day."""
        return sorted(self._events, key=lambda e: e.date)

    def events_for_date(self, target_date: date) -> List[CycleEvent]:
        """Events logged on a date, in insertion order."""
        return [e for e in self._events if e.date == target_date]

    def upsert_daily_log(
        self,
        log_date: date,
        mood: Optional[int] = None,
        energy: Optional[int] = None,
        symptoms: Optional[List[str]] = None,
        notes: Optional[str] = None
    ) -> DailyLog:
        """
        Create or replace the log for a date.

        A replaced log keeps its id.

        Raises:
            pydantic.ValidationError: If mood or energy is outside 1-5
        """
        existing = self._logs.get(log_date)
        log = DailyLog(
            date=log_date,
            mood=mood,
            energy=energy,
            symptoms=symptoms or [],
            notes=notes or None,
            id=existing.id if existing else str(uuid.uuid4()),
            user_id=self.user_id
        )
        self._logs[log_date] = log
        logger.info("Stored daily log", extra={
            "log_id": log.id,
            "date": str(log_date),
            "replaced": existing is not None
        })
        return log

    def get_daily_log(self, log_date: date) -> Optional[DailyLog]:
        """Log for a date, or None."""
        return self._logs.get(log_date)

    def delete_daily_log(self, log_date: date) -> None:
        """
        Delete the log for a date.

        Raises:
            EntryNotFoundError: If there is no log for the date
        """
        if log_date not in self._logs:
            logger.warning("Daily log not found", extra={"date": str(log_date)})
            raise EntryNotFoundError(f"No daily log for {log_date}")
        del self._logs[log_date]
        logger.info("Deleted daily log", extra={"date": str(log_date)})

    def list_daily_logs(self) -> List[DailyLog]:
        """All daily logs ordered by date."""
        return sorted(self._logs.values(), key=lambda log: log.date)
