"""
Blog Models - posts, likes and comments
"""

import uuid

from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models, transaction

from .text import compute_read_time, make_excerpt, normalize_tags


class Post(models.Model):
    """
    Blog post.

    ``likes_count`` and ``comments_count`` are denormalized counters kept
    by the services layer: the like toggle updates ``likes_count`` in the
    same locked write as the ``likes`` change, and the comment service
    recomputes ``comments_count`` after every comment create/delete.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Core fields
    title = models.CharField(max_length=200, validators=[MinLengthValidator(5)])
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
        editable=False,
    )

    # Content
    content = models.TextField(validators=[MinLengthValidator(50)])
    excerpt = models.CharField(
        max_length=300,
        blank=True,
        help_text="Short summary (max 300 chars). Derived from content when left blank."
    )
    image = models.URLField(max_length=500, blank=True, null=True)
    tags = models.JSONField(default=list, blank=True)

    # Status
    published = models.BooleanField(default=True)
    read_time = models.PositiveIntegerField(default=1, help_text="Minutes, derived from content")

    # Engagement
    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="liked_posts",
    )
    likes_count = models.PositiveIntegerField(default=0)
    comments_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="blog_post_created_5a1c2e_idx"),
            models.Index(fields=["published"], name="blog_post_publish_8d3f41_idx"),
            models.Index(fields=["author"], name="blog_post_author__b7e902_idx"),
        ]

    def save(self, *args, **kwargs):
        update_fields = kwargs.get("update_fields")
        if update_fields is None:
            self.tags = normalize_tags(self.tags or [])
            self.apply_derived_fields()
        elif "content" in update_fields:
            self.apply_derived_fields()
            kwargs["update_fields"] = set(update_fields) | {"excerpt", "read_time"}
        with transaction.atomic():
            super().save(*args, **kwargs)
            if update_fields is None or "tags" in update_fields:
                self.sync_tag_rows()

    def sync_tag_rows(self):
        """Mirror ``tags`` into PostTag rows so search can match single tags."""
        names = list(self.tags or [])
        if list(self.post_tags.values_list("name", flat=True)) == names:
            return
        self.post_tags.all().delete()
        PostTag.objects.bulk_create(
            PostTag(post=self, name=name, position=position)
            for position, name in enumerate(names)
        )

    def apply_derived_fields(self):
        """Fill a blank excerpt and recompute read time from content."""
        if not self.content:
            return
        if not self.excerpt:
            self.excerpt = make_excerpt(self.content)
        self.read_time = compute_read_time(self.content)

    def is_liked_by(self, user) -> bool:
        if not user or not user.is_authenticated:
            return False
        return self.likes.filter(pk=user.pk).exists()

    def is_owned_by(self, user) -> bool:
        return bool(user and user.is_authenticated and self.author_id == user.pk)

    def __str__(self):
        return self.title


class Comment(models.Model):
    """A reply attached to exactly one post."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    content = models.CharField(max_length=1000, validators=[MinLengthValidator(1)])
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
        editable=False,
    )
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name="comments",
        editable=False,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["post", "-created_at"], name="blog_commen_post_id_3c9a7d_idx"),
            models.Index(fields=["author"], name="blog_commen_author__e41b6f_idx"),
        ]

    def is_owned_by(self, user) -> bool:
        return bool(user and user.is_authenticated and self.author_id == user.pk)

    def __str__(self):
        return f"{self.author} on {self.post_id}: {self.content[:40]}"


class PostTag(models.Model):
    """One element of ``Post.tags``, stored as a row for per-tag lookups."""

    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="post_tags")
    name = models.CharField(max_length=30)
    position = models.PositiveSmallIntegerField()

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["name"], name="blog_postta_name_6b2d90_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["post", "position"], name="blog_posttag_post_position_uniq"),
        ]

    def __str__(self):
        return self.name
