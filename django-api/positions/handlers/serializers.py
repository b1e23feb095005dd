"""Serializers validating position input and rendering position domain models."""

from datetime import date

from django.utils import timezone
from rest_framework import serializers


def end_of_year() -> date:
    return date(timezone.localdate().year, 12, 31)


class UpdatePositionSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    email = serializers.EmailField(required=False, allow_null=True)


class AddMandateSerializer(serializers.Serializer):
    member_id = serializers.UUIDField()
    start_date = serializers.DateField(default=timezone.localdate)
    end_date = serializers.DateField(default=end_of_year)

    def validate(self, attrs):
        if attrs["end_date"] < attrs["start_date"]:
            raise serializers.ValidationError({"end_date": "End date is before start date"})
        return attrs


class UpdateMandateSerializer(serializers.Serializer):
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)


class MemberSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    student_id = serializers.CharField()
    first_name = serializers.CharField(allow_null=True)
    last_name = serializers.CharField(allow_null=True)


class MandateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    position_id = serializers.CharField()
    member = MemberSummarySerializer()
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class PositionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    email = serializers.EmailField(allow_null=True)
    mandates = MandateSerializer(many=True)
    email_aliases = serializers.ListField(child=serializers.EmailField())
