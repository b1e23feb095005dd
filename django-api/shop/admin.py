from django.contrib import admin

from shop.models import Consumable, ConsumableReservation, Shoppable, Ticket


class TicketInline(admin.StackedInline):
    model = Ticket
    extra = 0


@admin.register(Shoppable)
class ShoppableAdmin(admin.ModelAdmin):
    list_display = ["title", "price", "stock", "available_from", "available_to", "removed_at"]
    search_fields = ["title"]
    inlines = [TicketInline]


@admin.register(Consumable)
class ConsumableAdmin(admin.ModelAdmin):
    list_display = ["shoppable", "member", "purchased_at", "expires_at"]
    list_filter = ["shoppable"]


@admin.register(ConsumableReservation)
class ConsumableReservationAdmin(admin.ModelAdmin):
    list_display = ["shoppable", "member", "order"]
    list_filter = ["shoppable"]
