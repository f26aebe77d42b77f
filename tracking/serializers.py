"""
Tracking API Serializers
"""

from rest_framework import serializers

from .models import Contact


class RegisterSerializer(serializers.Serializer):
    """
    Registration payload. Presence and format of ``email`` are checked by
    the service so every entry point shares one rule.
    """

    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=254)
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    campaign = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)


class ContactSummarySerializer(serializers.ModelSerializer):
    """Compact contact row for the filter listing."""

    class Meta:
        model = Contact
        fields = ["name", "email"]


class StatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    opened = serializers.IntegerField()
    clicked = serializers.IntegerField()
    openRate = serializers.CharField()
    clickRate = serializers.CharField()
