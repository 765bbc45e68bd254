"""
Post Services
=============

Business logic for authoring, listing and liking posts.
"""

from typing import Optional

from core.exceptions import NotFoundError
from core.pagination import Page, PageParams, paginate
from core.services import BaseService

# Fields an author may change after creation; author itself is immutable.
EDITABLE_FIELDS = ("title", "content", "excerpt", "image", "tags", "published")


class PostService(BaseService):
    """
    Post use cases.

    Args:
        posts: ``PostRepository``
        gate: ``OwnershipGate`` over the same repository
    """

    def __init__(self, posts, gate):
        self.posts = posts
        self.gate = gate

    # ── Queries ───────────────────────────────────────────────────────

    def list_posts(self, params: PageParams, sort: str, query: Optional[str] = None) -> Page:
        """Published posts, optionally filtered by a free-text query."""
        items, total = self.posts.page_published(params, sort=sort, query=query or None)
        return paginate(items, total, params)

    def list_user_posts(self, author_id, params: PageParams, viewer=None) -> Page:
        """A user's posts; drafts are included only for the user themselves."""
        own = bool(viewer and viewer.is_authenticated and viewer.pk == author_id)
        items, total = self.posts.page_by_author(author_id, params, include_unpublished=own)
        return paginate(items, total, params)

    def get_post(self, post_id, viewer=None):
        """
        Fetch one post.

        Unpublished posts are visible to their author only; everyone else
        gets the same 404 as for a missing id.
        """
        post = self.posts.get_by_id_or_none(post_id)
        if post is None or (not post.published and not post.is_owned_by(viewer)):
            raise NotFoundError("Post not found", resource="post")
        return post

    def liked_ids(self, user, posts) -> set:
        return self.posts.liked_ids(user, [post.pk for post in posts])

    # ── Commands ──────────────────────────────────────────────────────

    def create_post(self, author, **fields):
        """Create a post owned by ``author``. Derived fields are set on save."""
        data = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}
        post = self.posts.create(author=author, **data)
        self.logger.info("User %s created post %s", author.pk, post.pk)
        return post

    def update_post(self, post_id, user, **changes):
        """Apply a partial update after the ownership check."""
        post = self.gate.check(post_id, user)
        data = {key: value for key, value in changes.items() if key in EDITABLE_FIELDS}
        if data:
            post = self.posts.update(post, **data)
            self.logger.info("User %s updated post %s (%s)", user.pk, post.pk, ", ".join(sorted(data)))
        return post

    def delete_post(self, post_id, user) -> None:
        """Delete a post and, through the FK cascade, its comments."""
        post = self.gate.check(post_id, user)
        self.posts.delete(post)
        self.logger.info("User %s deleted post %s", user.pk, post_id)

    def toggle_like(self, post_id, user) -> tuple:
        """
        Flip ``user``'s like on a post.

        The post row is locked for the transaction so the membership change
        and ``likes_count`` move together.

        Returns:
            (liked, likes_count) tuple
        """
        with self.atomic():
            post = self.posts.lock(post_id)
            if post is None or (not post.published and not post.is_owned_by(user)):
                raise NotFoundError("Post not found", resource="post")

            if self.posts.has_liked(post, user):
                self.posts.remove_like(post, user)
                post.likes_count = max(0, post.likes_count - 1)
                liked = False
            else:
                self.posts.add_like(post, user)
                post.likes_count += 1
                liked = True

            post.save(update_fields=["likes_count"])

        self.logger.debug("User %s %s post %s", user.pk, "liked" if liked else "unliked", post_id)
        return liked, post.likes_count
