from rest_framework import serializers

from .models import Notice


class NoticeSerializer(serializers.ModelSerializer):
    """웹소켓과 API 응답에 공통으로 쓰이는 공지사항 표현입니다."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815
    expiresAt = serializers.DateTimeField(source="expires_at", read_only=True)  # noqa: N815

    class Meta:
        model = Notice
        fields = (
            "id",
            "title",
            "content",
            "category",
            "priority",
            "author",
            "createdAt",
            "expiresAt",
        )
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # 만료일시가 없으면 키 자체를 생략합니다.
        if data.get("expiresAt") is None:
            data.pop("expiresAt", None)
        return data


class NoticeInputSerializer(serializers.ModelSerializer):
    """ADD_NOTICE 명령으로 들어온 입력값을 검증하고 저장합니다."""

    expiresAt = serializers.DateTimeField(  # noqa: N815
        source="expires_at",
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Notice
        fields = ("title", "content", "category", "priority", "author", "expiresAt")
