import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(5)])),
                ("content", models.TextField(validators=[django.core.validators.MinLengthValidator(50)])),
                ("excerpt", models.CharField(
                    blank=True,
                    help_text="Short summary (max 300 chars). Derived from content when left blank.",
                    max_length=300,
                )),
                ("image", models.URLField(blank=True, max_length=500, null=True)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("published", models.BooleanField(default=True)),
                ("read_time", models.PositiveIntegerField(default=1, help_text="Minutes, derived from content")),
                ("likes_count", models.PositiveIntegerField(default=0)),
                ("comments_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(
                    editable=False,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="posts",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("likes", models.ManyToManyField(
                    blank=True,
                    related_name="liked_posts",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="blog_post_created_5a1c2e_idx"),
                    models.Index(fields=["published"], name="blog_post_publish_8d3f41_idx"),
                    models.Index(fields=["author"], name="blog_post_author__b7e902_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("content", models.CharField(max_length=1000, validators=[django.core.validators.MinLengthValidator(1)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(
                    editable=False,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="comments",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("post", models.ForeignKey(
                    editable=False,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="comments",
                    to="blog.post",
                )),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["post", "-created_at"], name="blog_commen_post_id_3c9a7d_idx"),
                    models.Index(fields=["author"], name="blog_commen_author__e41b6f_idx"),
                ],
            },
        ),
    ]
