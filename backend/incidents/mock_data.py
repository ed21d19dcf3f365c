"""
Seed data for the in-memory incident dashboard.

Builders return fresh objects on every call so each store owns its records.
"""
from datetime import timedelta

from django.utils import timezone

from .models import UNASSIGNED, Comment, Incident, Notification, User

MOCK_USERS = (
    User(id='user-1', name='Alice Johnson', avatar_url='https://i.pravatar.cc/40?u=user-1'),
    User(id='user-2', name='Bob Williams', avatar_url='https://i.pravatar.cc/40?u=user-2'),
    User(id='user-3', name='Charlie Brown', avatar_url='https://i.pravatar.cc/40?u=user-3'),
    User(id='user-4', name='Diana Davis', avatar_url='https://i.pravatar.cc/40?u=user-4'),
    User(id=UNASSIGNED, name='Unassigned'),
)

_AUTHORS = [user.name for user in MOCK_USERS if user.id != UNASSIGNED]


def _comments(incident_key, count, now):
    comments = []
    for i in range(count):
        comments.append(Comment(
            id=f"cmt-{incident_key}-{i + 1}",
            author=_AUTHORS[i % len(_AUTHORS)],
            text=f"This is comment number {i + 1}. Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            timestamp=now - timedelta(hours=6 * (count - i)),
        ))
    return comments


def build_incidents(now=None):
    now = now or timezone.now()
    return [
        Incident(
            id='inc-001',
            title='Minor UI Glitch in Reporting Module',
            description='Users reported a minor visual misalignment in the reporting module when viewed on older browsers. Does not affect functionality.',
            severity='Low',
            status='Closed',
            reported_date=now - timedelta(days=4),
            tags=['ui', 'bug', 'frontend'],
            comments=_comments('001', 1, now),
            assignee_id='user-1',
        ),
        Incident(
            id='inc-002',
            title='Incorrect Data Aggregation in Summary',
            description='The summary dashboard occasionally shows incorrect counts for medium severity incidents. Requires investigation into the aggregation logic.',
            severity='Medium',
            status='Investigating',
            reported_date=now - timedelta(days=3),
            due_date=(now + timedelta(days=7)).date(),
            tags=['data', 'backend', 'bug', 'dashboard'],
            comments=_comments('002', 3, now),
            assignee_id='user-2',
        ),
        Incident(
            id='inc-003',
            title='Critical Authentication Bypass Vulnerability',
            description='A severe vulnerability allows unauthorized access under specific conditions. Immediate patching required.',
            severity='High',
            status='Mitigated',
            reported_date=now - timedelta(days=2),
            due_date=(now + timedelta(days=1)).date(),
            tags=['security', 'auth', 'critical', 'backend'],
            comments=_comments('003', 5, now),
            assignee_id='user-3',
        ),
        Incident(
            id='inc-004',
            title='Slow API Response Time',
            description='The main data retrieval API is experiencing intermittent slowdowns during peak hours, affecting user experience.',
            severity='Medium',
            status='Investigating',
            reported_date=now - timedelta(days=1),
            tags=['performance', 'api', 'backend'],
            comments=_comments('004', 2, now),
            assignee_id='user-2',
        ),
        Incident(
            id='inc-005',
            title='Inconsistent Severity Tagging',
            description='Some automatically tagged incidents have inconsistent severity levels compared to manual assessments. Review tagging rules.',
            severity='Low',
            status='New',
            reported_date=now - timedelta(hours=2),
            tags=['ai', 'tagging', 'data-quality'],
        ),
    ]


def build_notifications(now=None):
    now = now or timezone.now()
    return [
        Notification(
            id='notif-1',
            title='Incident Resolved',
            message="Incident 'inc-003' status changed to Mitigated.",
            timestamp=now - timedelta(days=1),
            read=True,
            incident_id='inc-003',
        ),
        Notification(
            id='notif-2',
            title='Comment Added',
            message="New comment added to incident 'inc-002'.",
            timestamp=now - timedelta(days=2),
            read=True,
            incident_id='inc-002',
        ),
        Notification(
            id='notif-3',
            title='Incident Reported',
            message="New incident 'inc-005' reported.",
            timestamp=now - timedelta(hours=2),
            incident_id='inc-005',
        ),
        Notification(
            id='notif-4',
            title='Incident Assigned',
            message="Incident 'inc-001' assigned to Alice Johnson.",
            timestamp=now - timedelta(days=4),
            read=True,
            incident_id='inc-001',
        ),
    ]
