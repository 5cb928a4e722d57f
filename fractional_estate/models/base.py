"""Base models shared across the ledger."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Standard event envelope for committed ledger mutations."""

    event_id: str
    event_type: str  # entity.action (e.g., shares.transferred)
    event_time: datetime
    source: str  # Service/system that produced it
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)
