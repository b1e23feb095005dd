from django.contrib import admin

from events.models import Event, Tag


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "start_datetime", "end_datetime", "is_draft", "removed_at"]
    list_filter = ["is_draft", "tags"]
    search_fields = ["title"]


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "color"]
    search_fields = ["name"]
