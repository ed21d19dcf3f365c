"""
models.py - Incident dashboard domain models

The dashboard keeps its records in process memory (see store.py), so these
are plain dataclasses rather than Django models.
"""
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from django.utils import timezone

SEVERITIES = ('Low', 'Medium', 'High')
STATUSES = ('New', 'Investigating', 'Mitigated', 'Closed')
RESOLVED_STATUSES = ('Mitigated', 'Closed')

# Pseudo-user used only by the assignee filter
UNASSIGNED = 'unassigned'


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    avatar_url: Optional[str] = None


@dataclass
class Comment:
    author: str
    text: str
    timestamp: datetime = field(default_factory=timezone.now)
    id: str = field(default_factory=lambda: new_id('cmt'))


@dataclass
class Incident:
    title: str
    description: str
    severity: str
    status: str = 'New'
    reported_date: datetime = field(default_factory=timezone.now)
    due_date: Optional[date] = None
    tags: list[str] = field(default_factory=list)
    regions: list[str] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    assignee_id: Optional[str] = None
    id: str = field(default_factory=lambda: new_id('inc'))

    @property
    def is_resolved(self) -> bool:
        return self.status in RESOLVED_STATUSES


@dataclass
class Notification:
    title: str
    message: str
    incident_id: Optional[str] = None
    read: bool = False
    timestamp: datetime = field(default_factory=timezone.now)
    id: str = field(default_factory=lambda: new_id('notif'))
