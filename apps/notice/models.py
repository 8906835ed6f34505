import typing

from django.db import models


class Notice(models.Model):
    """
    게시판에 표시되는 공지사항 모델입니다.

    생성 이후에는 수정되지 않으며, 삭제 명령으로만 사라집니다.
    만료일시(expires_at)는 참고용이며 서버가 자동으로 삭제하지 않습니다.
    """

    class Category(models.TextChoices):
        ACADEMIC = "Academic", "학사"
        EVENT = "Event", "행사"
        EXAM = "Exam", "시험"
        GENERAL = "General", "일반"
        EMERGENCY = "Emergency", "긴급"

    class Priority(models.TextChoices):
        LOW = "Low", "낮음"
        MEDIUM = "Medium", "보통"
        HIGH = "High", "높음"

    title = models.TextField(verbose_name="제목")
    content = models.TextField(verbose_name="내용")
    category = models.CharField(max_length=16, choices=Category.choices, verbose_name="분류")
    priority = models.CharField(max_length=8, choices=Priority.choices, verbose_name="중요도")
    author = models.TextField(verbose_name="작성자")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="생성일시")
    expires_at = models.DateTimeField(null=True, blank=True, verbose_name="만료일시")

    class Meta:
        verbose_name = "Notice"
        verbose_name_plural = "Notices"
        ordering: typing.ClassVar = ["-created_at", "-id"]

    def __str__(self):
        return self.title
