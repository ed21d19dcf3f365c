"""
store.py - In-memory incident store

Incidents are kept newest first. Edits replace a record wholesale, comments
are only ever appended, and every mutation emits a dashboard notification.
"""
import logging
import threading
from dataclasses import replace

from django.utils import timezone

from .filters import filter_and_sort
from .mock_data import MOCK_USERS, build_incidents, build_notifications
from .models import UNASSIGNED, Comment, Incident, Notification

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'description', 'severity', 'status', 'due_date', 'tags', 'regions', 'assignee_id')


class IncidentNotFound(Exception):
    message = 'Incident not found'

    def __init__(self, incident_id):
        super().__init__(f"{self.message}: {incident_id}")
        self.incident_id = incident_id


class IncidentStore:
    def __init__(self, incidents=None, users=MOCK_USERS, notifications=None):
        self._lock = threading.Lock()
        self._incidents = sorted(incidents or [], key=lambda inc: inc.reported_date, reverse=True)
        self._users = {user.id: user for user in users}
        self._notifications = list(notifications or [])

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self, flt=None):
        with self._lock:
            incidents = [self._snapshot(inc) for inc in self._incidents]
        return filter_and_sort(incidents, flt)

    def get(self, incident_id):
        with self._lock:
            return self._snapshot(self._find(incident_id))

    @staticmethod
    def _snapshot(incident):
        """Copy whose lists are detached from later appends"""
        return replace(
            incident,
            comments=list(incident.comments),
            tags=list(incident.tags),
            regions=list(incident.regions),
        )

    def _find(self, incident_id):
        for incident in self._incidents:
            if incident.id == incident_id:
                return incident
        raise IncidentNotFound(incident_id)

    def users(self, assignable_only=False):
        users = list(self._users.values())
        if assignable_only:
            users = [user for user in users if user.id != UNASSIGNED]
        return users

    def get_user(self, user_id):
        return self._users.get(user_id)

    def is_assignable(self, user_id):
        return user_id in self._users and user_id != UNASSIGNED

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def report(self, data):
        """Add a new incident; status always starts as New"""
        incident = Incident(
            title=data['title'],
            description=data['description'],
            severity=data['severity'],
            due_date=data.get('due_date'),
            tags=list(data.get('tags') or []),
            regions=list(data.get('regions') or []),
            assignee_id=data.get('assignee_id') or None,
        )
        with self._lock:
            self._incidents.insert(0, incident)
            self._incidents.sort(key=lambda inc: inc.reported_date, reverse=True)
            self._notify(
                'Incident Reported',
                f'New incident "{incident.title}" has been added.',
                incident.id,
            )
            result = self._snapshot(incident)
        logger.info(f"Reported incident {incident.id} ({incident.severity})")
        return result

    def update(self, incident_id, data):
        """Replace the editable fields of an incident in one step"""
        with self._lock:
            original = self._find(incident_id)
            changes = {name: data[name] for name in EDITABLE_FIELDS if name in data}
            for name in ('tags', 'regions'):
                if name in changes:
                    changes[name] = list(changes[name] or [])
            changes['assignee_id'] = changes.get('assignee_id', original.assignee_id) or None
            updated = replace(original, **changes)

            index = self._incidents.index(original)
            self._incidents[index] = updated
            self._notify_update(original, updated)
            result = self._snapshot(updated)

        logger.info(f"Updated incident {incident_id} (status {original.status} -> {updated.status})")
        return result

    def add_comment(self, incident_id, author, text):
        comment = Comment(author=author, text=text)
        with self._lock:
            incident = self._find(incident_id)
            incident.comments.append(comment)
            self._notify(
                'Comment Added',
                f'New comment by {comment.author} on "{incident.title}".',
                incident.id,
            )
        logger.info(f"Comment {comment.id} added to incident {incident_id}")
        return comment

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def notifications(self, unread_only=False):
        with self._lock:
            items = sorted(self._notifications, key=lambda n: n.timestamp, reverse=True)
        if unread_only:
            items = [n for n in items if not n.read]
        return items

    def mark_read(self, notification_ids=None):
        """Mark the given notifications (all when None) as read; returns the count changed"""
        changed = 0
        with self._lock:
            for notification in self._notifications:
                if notification.read:
                    continue
                if notification_ids is None or notification.id in notification_ids:
                    notification.read = True
                    changed += 1
        return changed

    def _notify(self, title, message, incident_id=None):
        self._notifications.append(Notification(
            title=title,
            message=message,
            incident_id=incident_id,
            timestamp=timezone.now(),
        ))

    def _notify_update(self, original, updated):
        if updated.is_resolved and not original.is_resolved:
            self._notify(
                'Incident Resolved',
                f'Incident "{updated.title}" has been marked as {updated.status}.',
                updated.id,
            )
        elif original.status != updated.status:
            self._notify(
                'Incident Status Updated',
                f'Status for "{updated.title}" changed to {updated.status}.',
                updated.id,
            )
        else:
            self._notify(
                'Incident Updated',
                f'Details for "{updated.title}" have been updated.',
                updated.id,
            )


# Global instance
incident_store = None


def get_incident_store():
    """Get or create the dashboard store, seeded with mock data"""
    global incident_store
    if incident_store is None:
        incident_store = IncidentStore(
            incidents=build_incidents(),
            notifications=build_notifications(),
        )
    return incident_store


def reset_incident_store():
    global incident_store
    incident_store = None
