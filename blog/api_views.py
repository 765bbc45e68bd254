"""
Blog API Views - REST API endpoints for posts, likes and comments

Views only parse input and shape output; the use cases live in
``blog.services``. Services are injected at URLconf import time via
``as_view(post_service=..., comment_service=...)``.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from core.responses import success_response
from .serializers import (
    CommentListQuerySerializer,
    CommentSerializer,
    CommentWriteSerializer,
    PostListQuerySerializer,
    PostSerializer,
    PostWriteSerializer,
    UserCommentsQuerySerializer,
    UserCommentSerializer,
    UserPostsQuerySerializer,
)


def _parse_query(serializer_class, request):
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer


class AuthenticatedWritesMixin:
    """GET is public; every other method needs a bearer token."""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]


# =============================================================================
# Posts
# =============================================================================

class PostListView(AuthenticatedWritesMixin, APIView):
    """
    GET  /posts/?page&limit&sort&search - published posts
    POST /posts/                        - create a post
    """
    post_service = None

    def get(self, request):
        query = _parse_query(PostListQuerySerializer, request)
        page = self.post_service.list_posts(
            query.to_page_params(),
            sort=query.sort_key,
            query=query.validated_data.get("search", "").strip(),
        )

        context = {"viewer": request.user}
        if request.user.is_authenticated:
            context["liked_ids"] = self.post_service.liked_ids(request.user, page.items)

        return success_response({
            "posts": PostSerializer(page.items, many=True, context=context).data,
            "pagination": page.metadata("totalPosts"),
        })

    def post(self, request):
        serializer = PostWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        post = self.post_service.create_post(request.user, **serializer.validated_data)

        return success_response(
            PostSerializer(post, context={"viewer": request.user}).data,
            message="Post created successfully",
            status=status.HTTP_201_CREATED,
        )


class PostDetailView(AuthenticatedWritesMixin, APIView):
    """
    GET    /posts/<id>/ - single post
    PUT    /posts/<id>/ - partial update (author only)
    DELETE /posts/<id>/ - delete (author only)
    """
    post_service = None

    def get(self, request, post_id):
        post = self.post_service.get_post(post_id, viewer=request.user)
        return success_response(PostSerializer(post, context={"viewer": request.user}).data)

    def put(self, request, post_id):
        serializer = PostWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        post = self.post_service.update_post(post_id, request.user, **serializer.validated_data)

        return success_response(
            PostSerializer(post, context={"viewer": request.user}).data,
            message="Post updated successfully",
        )

    patch = put

    def delete(self, request, post_id):
        self.post_service.delete_post(post_id, request.user)
        return success_response(message="Post deleted successfully")


class PostLikeView(APIView):
    """POST /posts/<id>/like/ - toggle the caller's like."""
    permission_classes = [IsAuthenticated]
    post_service = None

    def post(self, request, post_id):
        liked, likes_count = self.post_service.toggle_like(post_id, request.user)
        return success_response(
            {"liked": liked, "likesCount": likes_count},
            message="Post liked successfully" if liked else "Post unliked successfully",
        )


class UserPostListView(APIView):
    """GET /posts/user/<user_id>/ - a user's posts (drafts only for themselves)."""
    permission_classes = [AllowAny]
    post_service = None

    def get(self, request, user_id):
        query = _parse_query(UserPostsQuerySerializer, request)
        page = self.post_service.list_user_posts(user_id, query.to_page_params(), viewer=request.user)

        context = {"viewer": request.user}
        if request.user.is_authenticated:
            context["liked_ids"] = self.post_service.liked_ids(request.user, page.items)

        return success_response({
            "posts": PostSerializer(page.items, many=True, context=context).data,
            "pagination": page.metadata("totalPosts"),
        })


# =============================================================================
# Comments
# =============================================================================

class PostCommentListView(AuthenticatedWritesMixin, APIView):
    """
    GET  /comments/post/<post_id>/?page&limit&sort - comments on a post
    POST /comments/post/<post_id>/                 - add a comment
    """
    comment_service = None

    def get(self, request, post_id):
        query = _parse_query(CommentListQuerySerializer, request)
        page = self.comment_service.list_for_post(
            post_id, query.to_page_params(), sort=query.sort_key, viewer=request.user,
        )
        return success_response({
            "comments": CommentSerializer(page.items, many=True).data,
            "pagination": page.metadata("totalComments"),
        })

    def post(self, request, post_id):
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = self.comment_service.create_comment(
            post_id, request.user, serializer.validated_data["content"],
        )

        return success_response(
            CommentSerializer(comment).data,
            message="Comment added successfully",
            status=status.HTTP_201_CREATED,
        )


class CommentDetailView(APIView):
    """
    PUT    /comments/<id>/ - edit content (author only)
    DELETE /comments/<id>/ - delete (author only)
    """
    permission_classes = [IsAuthenticated]
    comment_service = None

    def put(self, request, comment_id):
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = self.comment_service.update_comment(
            comment_id, request.user, serializer.validated_data["content"],
        )

        return success_response(CommentSerializer(comment).data, message="Comment updated successfully")

    patch = put

    def delete(self, request, comment_id):
        self.comment_service.delete_comment(comment_id, request.user)
        return success_response(message="Comment deleted successfully")


class UserCommentListView(APIView):
    """GET /comments/user/<user_id>/ - a user's comments, newest first."""
    permission_classes = [AllowAny]
    comment_service = None

    def get(self, request, user_id):
        query = _parse_query(UserCommentsQuerySerializer, request)
        page = self.comment_service.list_by_author(user_id, query.to_page_params(), viewer=request.user)
        return success_response({
            "comments": UserCommentSerializer(page.items, many=True).data,
            "pagination": page.metadata("totalComments"),
        })
