"""
Shared serializer helpers.

StrictFieldsMixin - rejects payload keys the serializer does not declare
DateRangeQuerySerializer - startDate/endDate query parameters, current month by default
"""

from rest_framework import serializers

from .dates import current_month_bounds


class StrictFieldsMixin:
    """
    Reject unknown input fields instead of silently dropping them.

    Used by update serializers so that a PATCH body can only touch the
    fields that are legally mutable.
    """

    def to_internal_value(self, data):
        if hasattr(data, 'keys'):
            writable = {
                name for name, field in self.fields.items()
                if not field.read_only
            }
            unknown = sorted(set(data.keys()) - writable)
            if unknown:
                raise serializers.ValidationError({
                    name: 'Unknown field.' for name in unknown
                })
        return super().to_internal_value(data)


class DateRangeQuerySerializer(serializers.Serializer):
    """
    Validate startDate/endDate query parameters.

    Query Parameters:
        startDate (date): First day of the range (inclusive)
        endDate (date): Last day of the range (inclusive)

    Note:
        When either bound is missing the range defaults to the current
        calendar month.
    """

    startDate = serializers.DateField(required=False, source='start_date')
    endDate = serializers.DateField(required=False, source='end_date')

    def validate(self, attrs):
        start = attrs.get('start_date')
        end = attrs.get('end_date')

        if start is None or end is None:
            attrs['start_date'], attrs['end_date'] = current_month_bounds()
        elif start > end:
            raise serializers.ValidationError({
                'startDate': 'Start date must be before end date'
            })

        return attrs
