from rest_framework import serializers
from .filters import ALL, SORT_ORDERS, IncidentFilter
from .models import SEVERITIES, STATUSES, UNASSIGNED
from .store import get_incident_store
from .tags import TagError, add_tag, normalize_tag


class UserSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    avatar_url = serializers.CharField(allow_null=True)


class CommentSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    author = serializers.CharField(read_only=True)
    text = serializers.CharField(max_length=1000)
    timestamp = serializers.DateTimeField(read_only=True)


class IncidentSerializer(serializers.Serializer):
    """Read-only representation; comments newest first"""
    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    severity = serializers.CharField()
    status = serializers.CharField()
    reported_date = serializers.DateTimeField()
    due_date = serializers.DateField(allow_null=True)
    tags = serializers.ListField(child=serializers.CharField())
    regions = serializers.ListField(child=serializers.CharField())
    assignee_id = serializers.CharField(allow_null=True)
    comments = serializers.SerializerMethodField()

    def get_comments(self, incident):
        ordered = sorted(incident.comments, key=lambda c: c.timestamp, reverse=True)
        return CommentSerializer(ordered, many=True).data


class NotificationSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    message = serializers.CharField()
    incident_id = serializers.CharField(allow_null=True)
    read = serializers.BooleanField()
    timestamp = serializers.DateTimeField()


class IncidentReportSerializer(serializers.Serializer):
    """Fields of the report form; status is not accepted here"""
    title = serializers.CharField(
        min_length=5,
        error_messages={'min_length': 'Title must be at least 5 characters.'}
    )
    description = serializers.CharField(
        min_length=10,
        max_length=500,
        error_messages={
            'min_length': 'Description must be at least 10 characters.',
            'max_length': 'Description cannot exceed 500 characters.',
        }
    )
    severity = serializers.ChoiceField(
        choices=SEVERITIES,
        error_messages={'required': 'You need to select a severity level.'}
    )
    due_date = serializers.DateField(required=False, allow_null=True)
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False
    )
    regions = serializers.ListField(child=serializers.CharField(), required=False)
    assignee_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def validate_tags(self, value):
        tags = []
        for raw in value:
            if normalize_tag(raw) in tags:
                continue
            try:
                tags = add_tag(tags, raw)
            except TagError as e:
                raise serializers.ValidationError(e.message)
        return tags

    def validate_assignee_id(self, value):
        if not value:
            return None
        if not get_incident_store().is_assignable(value):
            raise serializers.ValidationError('Unknown assignee.')
        return value


class IncidentUpdateSerializer(IncidentReportSerializer):
    """Edit form: the whole record is resubmitted, including status"""
    status = serializers.ChoiceField(
        choices=STATUSES,
        error_messages={'required': 'You need to select a status.'}
    )


class IncidentFilterSerializer(serializers.Serializer):
    severity = serializers.ChoiceField(choices=(ALL, *SEVERITIES), required=False, default=ALL)
    status = serializers.ChoiceField(choices=(ALL, *STATUSES), required=False, default=ALL)
    assignee = serializers.CharField(required=False, default=ALL)
    search = serializers.CharField(required=False, allow_blank=True, default='')
    dateFrom = serializers.DateField(required=False, allow_null=True, default=None)
    dateTo = serializers.DateField(required=False, allow_null=True, default=None)
    sort = serializers.ChoiceField(choices=SORT_ORDERS, required=False, default='newest')

    def validate_assignee(self, value):
        if value in (ALL, UNASSIGNED) or get_incident_store().get_user(value):
            return value
        raise serializers.ValidationError('Unknown assignee.')

    def validate(self, data):
        if data['dateFrom'] and data['dateTo'] and data['dateFrom'] > data['dateTo']:
            raise serializers.ValidationError({'dateTo': 'dateTo must not be before dateFrom.'})
        return data

    def to_filter(self):
        data = self.validated_data
        return IncidentFilter(
            severity=data['severity'],
            status=data['status'],
            assignee=data['assignee'],
            search=data['search'],
            date_from=data['dateFrom'],
            date_to=data['dateTo'],
            sort=data['sort'],
        )


class CalendarQuerySerializer(IncidentFilterSerializer):
    year = serializers.IntegerField(min_value=1970, max_value=9999)
    month = serializers.IntegerField(min_value=1, max_value=12)


class MarkReadSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
