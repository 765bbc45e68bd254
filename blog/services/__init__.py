from .posts import PostService
from .comments import CommentService

__all__ = ["PostService", "CommentService"]
