from common.serializers import PartialUpdateSerializer, StrictFieldsMixin
from rest_framework import serializers


class CompanyCreateSerializer(StrictFieldsMixin, serializers.Serializer):
    handle = serializers.SlugField(max_length=25)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True)
    numEmployees = serializers.IntegerField(
        min_value=0, required=False, allow_null=True
    )
    logoUrl = serializers.URLField(required=False, allow_null=True)


class CompanyUpdateSerializer(PartialUpdateSerializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(allow_blank=True, required=False)
    numEmployees = serializers.IntegerField(
        min_value=0, required=False, allow_null=True
    )
    logoUrl = serializers.URLField(required=False, allow_null=True)
