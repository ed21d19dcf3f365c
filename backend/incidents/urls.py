from django.urls import path
from .views import (
    IncidentCalendarView,
    IncidentCommentsView,
    IncidentDetailView,
    IncidentsView,
    IncidentUsersView,
    NotificationsReadView,
    NotificationsView,
)

urlpatterns = [
    path('', IncidentsView.as_view(), name='incidents'),
    path('calendar/', IncidentCalendarView.as_view(), name='incident-calendar'),
    path('users/', IncidentUsersView.as_view(), name='incident-users'),
    path('notifications/', NotificationsView.as_view(), name='incident-notifications'),
    path('notifications/read/', NotificationsReadView.as_view(), name='incident-notifications-read'),
    path('<str:incident_id>/', IncidentDetailView.as_view(), name='incident-detail'),
    path('<str:incident_id>/comments/', IncidentCommentsView.as_view(), name='incident-comments'),
]
