"""
Blog Repositories
=================

Data-access layer for Post and Comment models.
"""

from typing import Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from core.pagination import PageParams
from core.repositories import BaseRepository
from .models import Post, PostTag, Comment

# Wire sort keys → ORM ordering. Ties break on id so paging is stable.
POST_SORTS = {
    "-createdAt": ("-created_at", "-id"),
    "createdAt": ("created_at", "id"),
    "-likesCount": ("-likes_count", "-created_at", "-id"),
    "likesCount": ("likes_count", "-created_at", "-id"),
    "-title": ("-title", "-id"),
    "title": ("title", "id"),
}

COMMENT_SORTS = {
    "-createdAt": ("-created_at", "-id"),
    "createdAt": ("created_at", "id"),
}

NEWEST_FIRST = "-createdAt"


class PostRepository(BaseRepository[Post]):
    """Blog post data access."""

    model = Post

    def queryset(self) -> QuerySet:
        return self.model.objects.select_related("author")

    def published(self) -> QuerySet:
        return self.queryset().filter(published=True)

    @staticmethod
    def search_filter(query: str) -> Q:
        """Case-insensitive substring match on title, content or a single tag."""
        # tag names are stored lowercased
        tagged = PostTag.objects.filter(name__icontains=query.lower()).values("post_id")
        return (
            Q(title__icontains=query)
            | Q(content__icontains=query)
            | Q(pk__in=tagged)
        )

    def page_published(self, params: PageParams, sort: str = NEWEST_FIRST,
                       query: Optional[str] = None) -> Tuple[list, int]:
        """
        One page of published posts and the total match count.

        With a search query the order is always newest first.
        """
        qs = self.published()
        if query:
            qs = qs.filter(self.search_filter(query))
            sort = NEWEST_FIRST
        qs = qs.order_by(*POST_SORTS[sort])
        return list(params.window(qs)), qs.count()

    def page_by_author(self, author_id, params: PageParams,
                       include_unpublished: bool = False) -> Tuple[list, int]:
        qs = self.queryset().filter(author_id=author_id)
        if not include_unpublished:
            qs = qs.filter(published=True)
        qs = qs.order_by(*POST_SORTS[NEWEST_FIRST])
        return list(params.window(qs)), qs.count()

    def lock(self, pk) -> Optional[Post]:
        """Row-lock a post for the rest of the current transaction."""
        try:
            return self.model.objects.select_for_update().filter(pk=pk).first()
        except (DjangoValidationError, ValueError):
            return None

    def has_liked(self, post: Post, user) -> bool:
        return post.likes.filter(pk=user.pk).exists()

    def add_like(self, post: Post, user) -> None:
        post.likes.add(user)

    def remove_like(self, post: Post, user) -> None:
        post.likes.remove(user)

    def liked_ids(self, user, post_ids) -> set:
        """Ids among ``post_ids`` that ``user`` has liked."""
        if not user or not user.is_authenticated or not post_ids:
            return set()
        return set(
            self.model.likes.through.objects.filter(
                user_id=user.pk, post_id__in=post_ids
            ).values_list("post_id", flat=True)
        )

    def set_comments_count(self, post_id, count: int) -> int:
        """Write the denormalized comment counter; returns rows updated."""
        return self.model.objects.filter(pk=post_id).update(comments_count=count)


class CommentRepository(BaseRepository[Comment]):
    """Comment data access."""

    model = Comment

    def queryset(self) -> QuerySet:
        return self.model.objects.select_related("author", "post")

    def count_for_post(self, post_id) -> int:
        return self.count(post_id=post_id)

    def page_for_post(self, post_id, params: PageParams,
                      sort: str = NEWEST_FIRST) -> Tuple[list, int]:
        qs = self.queryset().filter(post_id=post_id).order_by(*COMMENT_SORTS[sort])
        return list(params.window(qs)), qs.count()

    def page_by_author(self, author_id, params: PageParams,
                       viewer_id=None) -> Tuple[list, int]:
        """A user's comments on published posts, plus drafts owned by ``viewer_id``."""
        visible = Q(post__published=True)
        if viewer_id is not None:
            visible |= Q(post__author_id=viewer_id)
        qs = (
            self.queryset()
            .filter(visible, author_id=author_id)
            .order_by(*COMMENT_SORTS[NEWEST_FIRST])
        )
        return list(params.window(qs)), qs.count()
