from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Notice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.TextField(verbose_name="제목")),
                ("content", models.TextField(verbose_name="내용")),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Academic", "학사"),
                            ("Event", "행사"),
                            ("Exam", "시험"),
                            ("General", "일반"),
                            ("Emergency", "긴급"),
                        ],
                        max_length=16,
                        verbose_name="분류",
                    ),
                ),
                (
                    "priority",
                    models.CharField(
                        choices=[("Low", "낮음"), ("Medium", "보통"), ("High", "높음")],
                        max_length=8,
                        verbose_name="중요도",
                    ),
                ),
                ("author", models.TextField(verbose_name="작성자")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="생성일시")),
                ("expires_at", models.DateTimeField(blank=True, null=True, verbose_name="만료일시")),
            ],
            options={
                "verbose_name": "Notice",
                "verbose_name_plural": "Notices",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
