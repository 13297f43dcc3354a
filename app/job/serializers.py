from common.serializers import PartialUpdateSerializer, StrictFieldsMixin
from rest_framework import serializers


class JobCreateSerializer(StrictFieldsMixin, serializers.Serializer):
    title = serializers.CharField(max_length=255)
    salary = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    equity = serializers.DecimalField(
        max_digits=4,
        decimal_places=3,
        min_value=0,
        max_value=1,
        required=False,
        allow_null=True,
    )
    companyHandle = serializers.CharField(max_length=25)


class JobUpdateSerializer(PartialUpdateSerializer):
    """id, companyHandle은 변경할 수 없습니다."""

    title = serializers.CharField(max_length=255, required=False)
    salary = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    equity = serializers.DecimalField(
        max_digits=4,
        decimal_places=3,
        min_value=0,
        max_value=1,
        required=False,
        allow_null=True,
    )
