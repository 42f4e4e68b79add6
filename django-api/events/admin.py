from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["event_name", "ticket_price", "event_date_time", "duration_minutes"]
    search_fields = ["event_name"]
    list_filter = ["event_date_time"]
    ordering = ["event_date_time"]
