from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from .filters import incidents_by_day, next_sort_order
from .serializers import (
    CalendarQuerySerializer,
    CommentSerializer,
    IncidentFilterSerializer,
    IncidentReportSerializer,
    IncidentSerializer,
    IncidentUpdateSerializer,
    MarkReadSerializer,
    NotificationSerializer,
    UserSerializer,
)
from .store import IncidentNotFound, get_incident_store
import logging

logger = logging.getLogger(__name__)


def validation_error(errors):
    return Response({
        'message': 'Validation failed',
        'errors': errors
    }, status=status.HTTP_400_BAD_REQUEST)


def viewer_denied(action):
    return Response({
        'message': f'Viewers cannot {action}.'
    }, status=status.HTTP_403_FORBIDDEN)


def not_found():
    return Response({
        'message': IncidentNotFound.message
    }, status=status.HTTP_404_NOT_FOUND)


def comment_author(user):
    return user.get_full_name() or user.email or user.username


class IncidentsView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        """List incidents, filtered and sorted by the query string"""
        query = IncidentFilterSerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error(query.errors)

        incidents = get_incident_store().list(query.to_filter())
        return Response({
            'incidents': IncidentSerializer(incidents, many=True).data,
            'total': len(incidents),
            'next_sort': next_sort_order(query.validated_data['sort'])
        })

    def post(self, request):
        """Report a new incident (admin only)"""
        if not request.user.is_dashboard_admin:
            return viewer_denied('report incidents')

        serializer = IncidentReportSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        try:
            incident = get_incident_store().report(serializer.validated_data)
            return Response(IncidentSerializer(incident).data, status=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Error reporting incident: {e}")
            return Response({
                'message': 'Failed to report incident'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class IncidentDetailView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, incident_id):
        try:
            return Response(IncidentSerializer(get_incident_store().get(incident_id)).data)
        except IncidentNotFound:
            return not_found()

    def put(self, request, incident_id):
        """Replace an incident with the submitted edit form (admin only)"""
        if not request.user.is_dashboard_admin:
            return viewer_denied('edit incidents')

        serializer = IncidentUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        # Optional fields left out of the form are cleared
        data = {'due_date': None, 'tags': [], 'regions': [], 'assignee_id': None, **serializer.validated_data}
        try:
            incident = get_incident_store().update(incident_id, data)
            return Response(IncidentSerializer(incident).data)
        except IncidentNotFound:
            return not_found()
        except Exception as e:
            logger.error(f"Error updating incident {incident_id}: {e}")
            return Response({
                'message': 'Failed to update incident'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class IncidentCommentsView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, incident_id):
        if not request.user.is_dashboard_admin:
            return viewer_denied('add comments')

        serializer = CommentSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        try:
            comment = get_incident_store().add_comment(
                incident_id,
                author=comment_author(request.user),
                text=serializer.validated_data['text']
            )
            return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)
        except IncidentNotFound:
            return not_found()
        except Exception as e:
            logger.error(f"Error adding comment to incident {incident_id}: {e}")
            return Response({
                'message': 'Failed to add comment'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class IncidentCalendarView(APIView):
    def get(self, request):
        """Filtered incidents of one month grouped by reported day"""
        query = CalendarQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error(query.errors)

        incidents = get_incident_store().list(query.to_filter())
        days = incidents_by_day(incidents, query.validated_data['year'], query.validated_data['month'])
        return Response({
            'days': {
                day.isoformat(): IncidentSerializer(items, many=True).data
                for day, items in days.items()
            }
        })


class IncidentUsersView(APIView):
    def get(self, request):
        """Users that incidents can be assigned to"""
        users = get_incident_store().users(assignable_only=True)
        return Response({'users': UserSerializer(users, many=True).data})


class NotificationsView(APIView):
    def get(self, request):
        unread_only = request.query_params.get('unread') in ('1', 'true', 'yes')
        store = get_incident_store()
        return Response({
            'notifications': NotificationSerializer(store.notifications(unread_only), many=True).data,
            'unread': len(store.notifications(unread_only=True))
        })


class NotificationsReadView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        """Mark notifications as read; all of them when no ids are sent"""
        serializer = MarkReadSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        ids = serializer.validated_data.get('ids')
        changed = get_incident_store().mark_read(set(ids) if ids is not None else None)
        return Response({'updated': changed})
