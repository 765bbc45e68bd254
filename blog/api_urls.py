"""
Blog API URL Configuration

Patterns are built from a service container so the views receive their
services as constructor arguments.
"""

from django.urls import path

from . import api_views


def post_urlpatterns(container):
    posts = container.post_service
    return [
        path("", api_views.PostListView.as_view(post_service=posts), name="post_list"),
        path("user/<int:user_id>/", api_views.UserPostListView.as_view(post_service=posts), name="user_posts"),
        path("<str:post_id>/", api_views.PostDetailView.as_view(post_service=posts), name="post_detail"),
        path("<str:post_id>/like/", api_views.PostLikeView.as_view(post_service=posts), name="post_like"),
    ]


def comment_urlpatterns(container):
    comments = container.comment_service
    return [
        path("post/<str:post_id>/", api_views.PostCommentListView.as_view(comment_service=comments), name="post_comments"),
        path("user/<int:user_id>/", api_views.UserCommentListView.as_view(comment_service=comments), name="user_comments"),
        path("<str:comment_id>/", api_views.CommentDetailView.as_view(comment_service=comments), name="comment_detail"),
    ]
