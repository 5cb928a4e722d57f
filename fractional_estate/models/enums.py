"""Enumeration types for ledger entities."""

from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    USER = "USER"


class PropertyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    MAINTENANCE = "MAINTENANCE"
    SOLD = "SOLD"


class ProposalStatus(str, Enum):
    OPEN = "OPEN"
    APPROVED = "APPROVED"  # transient, never stored
    REJECTED = "REJECTED"
    EXECUTED = "EXECUTED"
