from django.contrib import admin

from positions.models import EmailAlias, Mandate, Position


class MandateInline(admin.TabularInline):
    model = Mandate
    extra = 1


class EmailAliasInline(admin.TabularInline):
    model = EmailAlias
    extra = 0


@admin.register(Position)
class PositionAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "email"]
    search_fields = ["id", "name"]
    inlines = [MandateInline, EmailAliasInline]


@admin.register(Mandate)
class MandateAdmin(admin.ModelAdmin):
    list_display = ["position", "member", "start_date", "end_date"]
    list_filter = ["position"]
