"""
Service Container
=================

Builds repositories and services once, when the URLconf is imported at
process start, and hands them to the API views through
``APIView.as_view(**initkwargs)``.

Tests build their own container (or their own services around fake
repositories) instead of patching module globals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Container:
    post_service: object
    comment_service: object
    user_service: object


def build_container() -> Container:
    from blog.authorization import OwnershipGate
    from blog.repositories import PostRepository, CommentRepository
    from blog.services import PostService, CommentService
    from users.repositories import UserRepository
    from users.services import UserService

    posts = PostRepository()
    comments = CommentRepository()
    users = UserRepository()

    return Container(
        post_service=PostService(posts, OwnershipGate(posts, resource="post")),
        comment_service=CommentService(comments, posts, OwnershipGate(comments, resource="comment")),
        user_service=UserService(users),
    )
