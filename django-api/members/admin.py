from django.contrib import admin

from members.models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ["student_id", "first_name", "last_name", "created_at"]
    search_fields = ["student_id", "first_name", "last_name"]
