"""
Serializers for brews app.

Input Serializers:
    BrewFilterSerializer - Validates the ``filter`` query parameter
    BrewCreateSerializer - Validates brew measurements

Response Serializers:
    BrewRecordSerializer - Brew row with its relative display timestamp
    BrewStatisticsSerializer - Aggregates for the current window
    BrewListResponseSerializer - Filtered history with counters
"""

from django.utils import timezone
from rest_framework import serializers

from .models import BrewRecord
from .services import FilterWindow, format_relative


# =============================================================================
# Input Serializers
# =============================================================================

class BrewFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the brew list.

    Query Parameters:
        filter (str): today, week or all. Unknown values mean all. When
            absent the caller applies BREW_LOG['DEFAULT_FILTER'].
    """

    filter = serializers.CharField(required=False, allow_blank=True)

    def validate_filter(self, value):
        return FilterWindow.parse(value).value


class BrewCreateSerializer(serializers.Serializer):
    """
    Validate a brew submission.

    Fields:
        extraction_weight (float): Grams extracted
        extraction_time (float): Seconds
        grind_time (float): Seconds
    """

    extraction_weight = serializers.FloatField()
    extraction_time = serializers.FloatField()
    grind_time = serializers.FloatField()


# =============================================================================
# Output Serializers
# =============================================================================

class BrewRecordSerializer(serializers.ModelSerializer):
    """Brew record with a human-friendly timestamp relative to ``now``."""

    display_timestamp = serializers.SerializerMethodField()

    class Meta:
        model = BrewRecord
        fields = [
            'id',
            'extraction_weight',
            'extraction_time',
            'grind_time',
            'timestamp',
            'shift',
            'display_timestamp',
        ]
        read_only_fields = fields

    def get_display_timestamp(self, obj) -> str:
        now = self.context.get('now') or timezone.now()
        return format_relative(obj.timestamp, now)


class BrewStatisticsSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    avg_extraction_weight = serializers.FloatField(allow_null=True)
    avg_extraction_time = serializers.FloatField(allow_null=True)
    avg_grind_time = serializers.FloatField(allow_null=True)
    by_shift = serializers.DictField(child=serializers.IntegerField())


class BrewListResponseSerializer(serializers.Serializer):
    filter = serializers.ChoiceField(choices=FilterWindow.choices)
    total_count = serializers.IntegerField()
    showing_count = serializers.IntegerField()
    stats = BrewStatisticsSerializer()
    results = BrewRecordSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
