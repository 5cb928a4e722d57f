"""Journal of committed ledger mutations."""

import logging
import uuid
from collections import deque
from datetime import datetime
from typing import Any, Iterable

from fractional_estate.exceptions import ConfigurationError
from fractional_estate.models import Event

logger = logging.getLogger(__name__)


class EventJournal:
    """Append-only record of ledger events with sink export.

    Events accumulate in ``pending`` until :meth:`flush` writes them out,
    one batch per topic. ``history`` is kept for queries and is not cleared
    by a flush; with ``history_limit`` only the most recent events are kept.
    """

    def __init__(
        self,
        source: str = "fractional-estate",
        topic_prefix: str = "dev.estate",
        history_limit: int | None = None,
    ) -> None:
        if history_limit is not None and history_limit < 0:
            raise ConfigurationError(f"history_limit must be non-negative, got {history_limit}")
        self.source = source
        self.topic_prefix = topic_prefix
        self.history: deque[Event] = deque(maxlen=history_limit)
        self.pending: list[Event] = []
        self.recorded = 0

    def record(self, event_type: str, subject: Any, **data: Any) -> Event:
        event = Event(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            event_time=datetime.now(),
            source=self.source,
            subject=str(subject),
            data=data,
        )
        self.history.append(event)
        self.recorded += 1
        self.pending.append(event)
        logger.debug(
            "Recorded %s for %s",
            event_type,
            event.subject,
            extra={"ledger": {"event_type": event_type, "subject": event.subject, **data}},
        )
        return event

    def topic_for(self, event: Event) -> str:
        """Topic name: prefix plus the entity part of the event type."""
        entity = event.event_type.split(".", 1)[0]
        return f"{self.topic_prefix}.{entity}"

    def flush(self, sinks: Iterable[Any]) -> int:
        """Write pending events to every sink and clear them.

        Parameters
        ----------
        sinks : Iterable[Any]
            Objects exposing ``write_batch(topic, records)``.

        Returns
        -------
        int
            Number of events flushed.
        """
        batches: dict[str, list[Event]] = {}
        for event in self.pending:
            batches.setdefault(self.topic_for(event), []).append(event)

        sinks = list(sinks)
        for sink in sinks:
            for topic, events in batches.items():
                sink.write_batch(topic, events)

        count = len(self.pending)
        self.pending = []
        logger.info("Flushed %d events in %d topics to %d sinks", count, len(batches), len(sinks))
        return count

    def of_type(self, event_type: str) -> list[Event]:
        return [event for event in self.history if event.event_type == event_type]
