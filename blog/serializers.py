"""
Blog API Serializers - REST API for posts and comments

Output uses the API's camelCase field names; input serializers carry the
field constraints and report every violation at once.
"""

from rest_framework import serializers

from core.pagination import PageQuerySerializer
from inkwell.config import config
from users.serializers import AuthorSerializer
from .models import Post, Comment
from .repositories import POST_SORTS, COMMENT_SORTS
from .text import normalize_tags


# =============================================================================
# Query parameters
# =============================================================================

class PostListQuerySerializer(PageQuerySerializer):
    sort_choices = tuple(POST_SORTS)
    default_limit = config.pagination.posts_page_size

    search = serializers.CharField(required=False, allow_blank=True)


class CommentListQuerySerializer(PageQuerySerializer):
    sort_choices = tuple(COMMENT_SORTS)
    default_limit = config.pagination.comments_page_size


class UserPostsQuerySerializer(PageQuerySerializer):
    sort_choices = ("-createdAt",)
    default_limit = config.pagination.posts_page_size


class UserCommentsQuerySerializer(PageQuerySerializer):
    sort_choices = ("-createdAt",)
    default_limit = config.pagination.comments_page_size


# =============================================================================
# Posts
# =============================================================================

class PostSerializer(serializers.ModelSerializer):
    """
    Post as returned by the API.

    When the serializer context carries an authenticated ``viewer``,
    ``isLiked`` and ``isOwner`` are added. ``liked_ids`` in the context
    avoids one query per post on list pages.
    """

    author = AuthorSerializer(read_only=True)
    readTime = serializers.IntegerField(source="read_time", read_only=True)
    likesCount = serializers.IntegerField(source="likes_count", read_only=True)
    commentsCount = serializers.IntegerField(source="comments_count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Post
        fields = [
            "id", "title", "content", "excerpt", "image", "author", "tags",
            "published", "readTime", "likesCount", "commentsCount",
            "createdAt", "updatedAt",
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        viewer = self.context.get("viewer")
        if viewer is not None and viewer.is_authenticated:
            liked_ids = self.context.get("liked_ids")
            if liked_ids is None:
                data["isLiked"] = instance.is_liked_by(viewer)
            else:
                data["isLiked"] = instance.pk in liked_ids
            data["isOwner"] = instance.is_owned_by(viewer)
        return data


class PostWriteSerializer(serializers.Serializer):
    """Create / partial-update payload for posts."""

    title = serializers.CharField(min_length=5, max_length=200)
    content = serializers.CharField(min_length=50)
    excerpt = serializers.CharField(max_length=300, required=False, allow_blank=True)
    image = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    tags = serializers.ListField(
        child=serializers.CharField(min_length=1, max_length=30),
        required=False,
    )
    published = serializers.BooleanField(required=False)

    def validate_image(self, value):
        return value or None

    def validate_tags(self, value):
        return normalize_tags(value)


# =============================================================================
# Comments
# =============================================================================

class CommentSerializer(serializers.ModelSerializer):
    """Comment as returned by the API."""

    author = AuthorSerializer(read_only=True)
    post = serializers.UUIDField(source="post_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "content", "author", "post", "createdAt", "updatedAt"]
        read_only_fields = fields


class PostRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Post
        fields = ["id", "title"]
        read_only_fields = fields


class UserCommentSerializer(CommentSerializer):
    """Comment listed on a user's activity page, with its post's title."""

    post = PostRefSerializer(read_only=True)


class CommentWriteSerializer(serializers.Serializer):
    content = serializers.CharField(min_length=1, max_length=1000)
