"""
filters.py - Filter/sort projection over the incident collection

Everything here is pure: inputs are never mutated and the result is always
a subsequence of the incidents passed in.
"""
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from django.utils import timezone

from .models import UNASSIGNED

ALL = 'All'
SORT_ORDERS = ('newest', 'oldest', 'dueDate')


@dataclass(frozen=True)
class IncidentFilter:
    severity: str = ALL
    status: str = ALL
    assignee: str = ALL
    search: str = ''
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    sort: str = 'newest'


def _day(value):
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


def _matches_search(incident, needle):
    haystacks = [incident.title, incident.description, *incident.tags]
    return any(needle in text.lower() for text in haystacks)


def matches(incident, flt: IncidentFilter) -> bool:
    """True when the incident satisfies every predicate set on the filter"""
    if flt.severity != ALL and incident.severity != flt.severity:
        return False
    if flt.status != ALL and incident.status != flt.status:
        return False

    if flt.assignee == UNASSIGNED:
        if incident.assignee_id:
            return False
    elif flt.assignee != ALL and incident.assignee_id != flt.assignee:
        return False

    needle = flt.search.strip().lower()
    if needle and not _matches_search(incident, needle):
        return False

    reported = _day(incident.reported_date)
    if flt.date_from and reported < flt.date_from:
        return False
    if flt.date_to and reported > flt.date_to:
        return False

    return True


def sort_incidents(incidents, order='newest'):
    if order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {order}")

    if order == 'oldest':
        return sorted(incidents, key=lambda inc: inc.reported_date)

    newest_first = sorted(incidents, key=lambda inc: inc.reported_date, reverse=True)
    if order == 'newest':
        return newest_first
    # dueDate: earliest due first, undated last; stable sort keeps newest-first ties
    return sorted(newest_first, key=lambda inc: (inc.due_date is None, inc.due_date or date.max))


def filter_and_sort(incidents, flt: IncidentFilter = None):
    flt = flt or IncidentFilter()
    return sort_incidents([inc for inc in incidents if matches(inc, flt)], flt.sort)


def next_sort_order(current):
    """Cycle newest -> oldest -> dueDate -> newest"""
    try:
        index = SORT_ORDERS.index(current)
    except ValueError:
        return SORT_ORDERS[0]
    return SORT_ORDERS[(index + 1) % len(SORT_ORDERS)]


def incidents_by_day(incidents, year, month):
    """Group a month's incidents by reported day, for the calendar view"""
    days = defaultdict(list)
    for incident in incidents:
        reported = _day(incident.reported_date)
        if reported.year == year and reported.month == month:
            days[reported].append(incident)
    return dict(sorted(days.items()))
