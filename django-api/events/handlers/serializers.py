"""Serializers for transforming domain models to API responses and back.

Serializers check request shape only. Business rules live in the service.
Prices keep every decimal digit they arrive with.
"""

from rest_framework import serializers

from events.domain import Event, Money


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(read_only=True)
    event_name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True, allow_null=True, trim_whitespace=False),
        required=False,
        allow_null=True,
        allow_empty=True,
    )
    ticket_price = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True, min_value=0
    )
    event_date_time = serializers.DateTimeField(required=False, allow_null=True)
    duration_minutes = serializers.IntegerField(required=False, default=0)

    def to_representation(self, instance: Event) -> dict:
        return {
            "id": str(instance.id) if instance.id is not None else None,
            "event_name": instance.event_name,
            "tags": list(instance.tags) if instance.tags is not None else None,
            "ticket_price": (
                format(instance.ticket_price.amount, "f")
                if instance.ticket_price is not None
                else None
            ),
            "event_date_time": (
                instance.event_date_time.isoformat() if instance.event_date_time is not None else None
            ),
            "duration_minutes": instance.duration_minutes,
        }

    def to_event(self) -> Event:
        """Build a domain Event from validated data. Missing fields become None."""
        data = self.validated_data
        tags = data.get("tags")
        price = data.get("ticket_price")
        return Event(
            event_name=data.get("event_name"),
            tags=tuple(tags) if tags is not None else None,
            ticket_price=Money(price) if price is not None else None,
            event_date_time=data.get("event_date_time"),
            duration_minutes=data.get("duration_minutes") or 0,
        )


class PriceUpdateSerializer(serializers.Serializer):
    """Body of a price-only update. Sign is checked by the service."""

    ticket_price = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )


class TagQuerySerializer(serializers.Serializer):
    tag = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class PriceRangeQuerySerializer(serializers.Serializer):
    min_price = serializers.DecimalField(max_digits=None, decimal_places=None, required=False)
    max_price = serializers.DecimalField(max_digits=None, decimal_places=None, required=False)


class DateRangeQuerySerializer(serializers.Serializer):
    start = serializers.DateTimeField(required=False)
    end = serializers.DateTimeField(required=False)
