"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    organizer = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    email = serializers.CharField(source="email.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BookingRequestSerializer(serializers.Serializer):
    """Request body for booking an event. Email format is checked by the service."""

    email = serializers.CharField(trim_whitespace=False, allow_blank=True)


class DomainErrorSerializer(serializers.Serializer):
    """Error body returned for domain errors."""

    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
    field = serializers.CharField(allow_null=True)
