import pytest
from django.utils import timezone

from incidents.store import get_incident_store

pytestmark = pytest.mark.django_db

INCIDENTS_URL = '/api/incidents/'


def detail_url(incident_id):
    return f'{INCIDENTS_URL}{incident_id}/'


def report_payload(**overrides):
    payload = {
        'title': 'Checkout button unresponsive',
        'description': 'Clicking checkout does nothing on Safari 16',
        'severity': 'Medium',
        'tags': ['Checkout', 'safari'],
        'assignee_id': 'user-2',
    }
    payload.update(overrides)
    return payload


def edit_payload(**overrides):
    payload = report_payload(status='Investigating')
    payload.update(overrides)
    return payload


class TestListIncidents:
    def test_list_is_public(self, api_client):
        response = api_client.get(INCIDENTS_URL)

        assert response.status_code == 200
        data = response.json()
        assert data['total'] == 5
        assert [inc['id'] for inc in data['incidents']][0] == 'inc-005'

    def test_filters_are_applied(self, api_client):
        response = api_client.get(INCIDENTS_URL, {'severity': 'Medium', 'assignee': 'user-2', 'sort': 'oldest'})

        assert [inc['id'] for inc in response.json()['incidents']] == ['inc-002', 'inc-004']

    def test_search(self, api_client):
        response = api_client.get(INCIDENTS_URL, {'search': 'vulnerability'})

        assert [inc['id'] for inc in response.json()['incidents']] == ['inc-003']

    def test_next_sort_follows_current_order(self, api_client):
        assert api_client.get(INCIDENTS_URL).json()['next_sort'] == 'oldest'
        assert api_client.get(INCIDENTS_URL, {'sort': 'dueDate'}).json()['next_sort'] == 'newest'

    def test_unassigned_filter(self, api_client):
        response = api_client.get(INCIDENTS_URL, {'assignee': 'unassigned'})

        assert [inc['id'] for inc in response.json()['incidents']] == ['inc-005']

    @pytest.mark.parametrize('params, field', [
        ({'severity': 'Critical'}, 'severity'),
        ({'status': 'Done'}, 'status'),
        ({'sort': 'priority'}, 'sort'),
        ({'assignee': 'user-99'}, 'assignee'),
        ({'dateFrom': 'yesterday'}, 'dateFrom'),
        ({'dateFrom': '2024-06-10', 'dateTo': '2024-06-01'}, 'dateTo'),
    ])
    def test_invalid_filters(self, api_client, params, field):
        response = api_client.get(INCIDENTS_URL, params)

        assert response.status_code == 400
        assert field in response.json()['errors']

    def test_comments_are_newest_first(self, api_client):
        comments = api_client.get(detail_url('inc-003')).json()['comments']
        timestamps = [c['timestamp'] for c in comments]

        assert len(comments) == 5
        assert timestamps == sorted(timestamps, reverse=True)

    def test_missing_incident(self, api_client):
        response = api_client.get(detail_url('inc-404'))

        assert response.status_code == 404
        assert response.json() == {'message': 'Incident not found'}


class TestReportIncident:
    def test_requires_authentication(self, api_client):
        response = api_client.post(INCIDENTS_URL, report_payload())

        assert response.status_code == 401

    def test_viewer_cannot_report(self, viewer_client):
        response = viewer_client.post(INCIDENTS_URL, report_payload())

        assert response.status_code == 403
        assert response.json()['message'] == 'Viewers cannot report incidents.'
        assert len(get_incident_store().list()) == 5

    def test_admin_reports_incident(self, admin_client):
        response = admin_client.post(INCIDENTS_URL, report_payload(status='Closed'))

        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'New'
        assert data['tags'] == ['checkout', 'safari']
        assert data['comments'] == []
        assert get_incident_store().list()[0].id == data['id']

    @pytest.mark.parametrize('overrides, field', [
        ({'title': 'Bug'}, 'title'),
        ({'description': 'Too short'}, 'description'),
        ({'description': 'x' * 501}, 'description'),
        ({'severity': 'Critical'}, 'severity'),
        ({'tags': ['a', 'b', 'c', 'd', 'e', 'f']}, 'tags'),
        ({'tags': ['x' * 21]}, 'tags'),
        ({'tags': ['  ']}, 'tags'),
        ({'assignee_id': 'unassigned'}, 'assignee_id'),
        ({'assignee_id': 'user-99'}, 'assignee_id'),
        ({'due_date': 'next week'}, 'due_date'),
    ])
    def test_validation(self, admin_client, overrides, field):
        response = admin_client.post(INCIDENTS_URL, report_payload(**overrides))

        assert response.status_code == 400
        assert field in response.json()['errors']

    def test_validation_messages(self, admin_client):
        response = admin_client.post(INCIDENTS_URL, report_payload(title='Bug', severity=None))

        errors = response.json()['errors']
        assert errors['title'] == ['Title must be at least 5 characters.']
        assert 'severity' in errors

    def test_duplicate_tags_collapse_before_the_limit(self, admin_client):
        response = admin_client.post(INCIDENTS_URL, report_payload(tags=['a', 'A', 'b', 'c', 'd', 'e']))

        assert response.status_code == 201
        assert response.json()['tags'] == ['a', 'b', 'c', 'd', 'e']

    def test_tag_messages(self, admin_client):
        too_many = admin_client.post(INCIDENTS_URL, report_payload(tags=['a', 'b', 'c', 'd', 'e', 'f']))
        too_long = admin_client.post(INCIDENTS_URL, report_payload(tags=['x' * 21]))

        assert too_many.json()['errors']['tags'] == ['You can add a maximum of 5 tags.']
        assert too_long.json()['errors']['tags'] == ['Tags cannot exceed 20 characters.']

    def test_optional_fields(self, admin_client):
        response = admin_client.post(INCIDENTS_URL, {
            'title': 'Status page stale',
            'description': 'The public status page shows yesterday data',
            'severity': 'Low',
        })

        assert response.status_code == 201
        data = response.json()
        assert data['assignee_id'] is None
        assert data['due_date'] is None
        assert data['tags'] == []


class TestEditIncident:
    def test_viewer_cannot_edit(self, viewer_client):
        response = viewer_client.put(detail_url('inc-002'), edit_payload())

        assert response.status_code == 403

    def test_admin_edits_wholesale(self, admin_client):
        response = admin_client.put(detail_url('inc-002'), edit_payload(due_date='2030-01-31'))

        assert response.status_code == 200
        data = response.json()
        assert data['title'] == 'Checkout button unresponsive'
        assert data['status'] == 'Investigating'
        assert data['due_date'] == '2030-01-31'
        assert len(data['comments']) == 3

    def test_edit_keeps_regions(self, admin_client):
        data = admin_client.put(detail_url('inc-002'), edit_payload(regions=['EU-West'])).json()

        assert data['regions'] == ['EU-West']
        assert get_incident_store().get('inc-002').regions == ['EU-West']

    def test_omitted_optional_fields_are_cleared(self, admin_client):
        payload = edit_payload()
        del payload['tags']
        del payload['assignee_id']

        data = admin_client.put(detail_url('inc-002'), payload).json()

        assert data['tags'] == []
        assert data['assignee_id'] is None

    def test_status_is_required(self, admin_client):
        payload = edit_payload()
        del payload['status']

        response = admin_client.put(detail_url('inc-002'), payload)

        assert response.status_code == 400
        assert 'status' in response.json()['errors']

    def test_edit_missing_incident(self, admin_client):
        response = admin_client.put(detail_url('inc-404'), edit_payload())

        assert response.status_code == 404

    def test_resolution_emits_notification(self, admin_client, api_client):
        admin_client.put(detail_url('inc-002'), edit_payload(status='Closed'))

        notifications = api_client.get(f'{INCIDENTS_URL}notifications/').json()['notifications']
        assert notifications[0]['title'] == 'Incident Resolved'
        assert notifications[0]['incident_id'] == 'inc-002'


class TestComments:
    def test_requires_authentication(self, api_client):
        response = api_client.post(f"{detail_url('inc-001')}comments/", {'text': 'hello'})

        assert response.status_code == 401

    def test_viewer_cannot_comment(self, viewer_client):
        response = viewer_client.post(f"{detail_url('inc-001')}comments/", {'text': 'hello'})

        assert response.status_code == 403
        assert response.json()['message'] == 'Viewers cannot add comments.'

    def test_admin_comments(self, admin_client, admin_user):
        response = admin_client.post(f"{detail_url('inc-001')}comments/", {'text': 'Fixed in CSS'})

        assert response.status_code == 201
        assert response.json()['author'] == admin_user.email
        comments = get_incident_store().get('inc-001').comments
        assert comments[-1].text == 'Fixed in CSS'

    def test_blank_comment_is_rejected(self, admin_client):
        response = admin_client.post(f"{detail_url('inc-001')}comments/", {'text': '   '})

        assert response.status_code == 400
        assert 'text' in response.json()['errors']

    def test_comment_on_missing_incident(self, admin_client):
        response = admin_client.post(f"{detail_url('inc-404')}comments/", {'text': 'hello'})

        assert response.status_code == 404


class TestDashboardExtras:
    def test_users_exclude_unassigned(self, api_client):
        users = api_client.get(f'{INCIDENTS_URL}users/').json()['users']

        assert [u['id'] for u in users] == ['user-1', 'user-2', 'user-3', 'user-4']

    def test_calendar_groups_by_day(self, api_client):
        today = timezone.localdate()
        response = api_client.get(f'{INCIDENTS_URL}calendar/', {
            'year': today.year,
            'month': today.month,
            'severity': 'Low',
        })

        assert response.status_code == 200
        days = response.json()['days']
        for day, incidents in days.items():
            assert day.startswith(f'{today.year:04d}-{today.month:02d}-')
            assert all(inc['severity'] == 'Low' for inc in incidents)

    def test_calendar_requires_month(self, api_client):
        response = api_client.get(f'{INCIDENTS_URL}calendar/', {'year': 2024})

        assert response.status_code == 400
        assert 'month' in response.json()['errors']

    def test_mark_notifications_read(self, viewer_client):
        before = viewer_client.get(f'{INCIDENTS_URL}notifications/').json()
        assert before['unread'] == 1

        response = viewer_client.post(f'{INCIDENTS_URL}notifications/read/', {})

        assert response.json() == {'updated': 1}
        assert viewer_client.get(f'{INCIDENTS_URL}notifications/', {'unread': 'true'}).json()['notifications'] == []

    def test_mark_read_requires_authentication(self, api_client):
        response = api_client.post(f'{INCIDENTS_URL}notifications/read/', {})

        assert response.status_code == 401
        assert len(get_incident_store().notifications(unread_only=True)) == 1
