"""
Comment Services
================

Comment use cases. Every create and delete is followed by an explicit
recount of the parent post's ``comments_count``. The recount runs after
the comment write has committed; if it fails the counter stays stale
until the next comment write on that post, and the comment operation
still succeeds.
"""

from django.db import DatabaseError

from core.exceptions import NotFoundError
from core.pagination import Page, PageParams, paginate
from core.services import BaseService


class CommentService(BaseService):
    """
    Args:
        comments: ``CommentRepository``
        posts: ``PostRepository``
        gate: ``OwnershipGate`` over the comment repository
    """

    def __init__(self, comments, posts, gate):
        self.comments = comments
        self.posts = posts
        self.gate = gate

    def _visible_post(self, post_id, viewer):
        post = self.posts.get_by_id_or_none(post_id)
        if post is None or (not post.published and not post.is_owned_by(viewer)):
            raise NotFoundError("Post not found", resource="post")
        return post

    # ── Queries ───────────────────────────────────────────────────────

    def list_for_post(self, post_id, params: PageParams, sort: str, viewer=None) -> Page:
        post = self._visible_post(post_id, viewer)
        items, total = self.comments.page_for_post(post.pk, params, sort=sort)
        return paginate(items, total, params)

    def list_by_author(self, author_id, params: PageParams, viewer=None) -> Page:
        viewer_id = viewer.pk if viewer and viewer.is_authenticated else None
        items, total = self.comments.page_by_author(author_id, params, viewer_id=viewer_id)
        return paginate(items, total, params)

    # ── Commands ──────────────────────────────────────────────────────

    def create_comment(self, post_id, author, content: str):
        post = self._visible_post(post_id, author)

        comment = self.comments.create(post=post, author=author, content=content)
        self.logger.info("User %s commented %s on post %s", author.pk, comment.pk, post.pk)

        self.sync_comments_count(post.pk)
        return comment

    def update_comment(self, comment_id, user, content: str):
        comment = self.gate.check(comment_id, user)
        return self.comments.update(comment, content=content)

    def delete_comment(self, comment_id, user) -> None:
        comment = self.gate.check(comment_id, user)
        post_id = comment.post_id

        self.comments.delete(comment)
        self.logger.info("User %s deleted comment %s on post %s", user.pk, comment_id, post_id)

        self.sync_comments_count(post_id)

    def sync_comments_count(self, post_id):
        """
        Recount the post's comments and store the result.

        Returns the new count, or None when the recount failed (logged).
        """
        try:
            with self.atomic():
                count = self.comments.count_for_post(post_id)
                self.posts.set_comments_count(post_id, count)
        except DatabaseError:
            self.logger.exception("Failed to update comment count for post %s", post_id)
            return None
        return count
