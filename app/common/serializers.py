from __future__ import annotations

from rest_framework import serializers


class StrictFieldsMixin:
    """선언되지 않은 필드가 요청 body에 있으면 400으로 거절합니다."""

    def validate(self, attrs):
        initial = self.initial_data if isinstance(self.initial_data, dict) else {}
        unknown = sorted(set(initial) - set(self.fields))
        if unknown:
            raise serializers.ValidationError(
                {key: ["This field is not allowed."] for key in unknown}
            )
        return super().validate(attrs)


class PartialUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """
    PATCH 요청용 serializer 베이스.

    - 모든 필드는 선택
    - 최소 1개 필드가 있어야 함
    """

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if not attrs:
            raise serializers.ValidationError("no data supplied")
        return attrs
