"""
Blog Admin - posts with publish/unpublish actions, comment moderation
"""

from django.contrib import admin
from django.contrib import messages
from django.utils.functional import cached_property
from django.utils.html import format_html

from .models import Post, Comment


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    can_delete = False
    fields = ["author", "content", "created_at"]
    readonly_fields = fields
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title", "author", "status_badge", "likes_count", "comments_count", "read_time", "created_at"]
    list_filter = ["published", "created_at"]
    search_fields = ["title", "content", "excerpt"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    readonly_fields = ["author", "read_time", "likes_count", "comments_count", "created_at", "updated_at"]
    inlines = [CommentInline]

    actions = ["publish_posts", "unpublish_posts"]

    fieldsets = (
        ("Content", {
            "fields": ("title", "author", "excerpt", "content", "image", "tags")
        }),
        ("Status", {
            "fields": ("published", "read_time", "likes_count", "comments_count"),
        }),
        ("Timestamps", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def status_badge(self, obj):
        """Display published flag as colored badge"""
        if obj.published:
            return format_html(
                '<span style="background: #28a745; color: white; padding: 3px 10px; '
                'border-radius: 3px; font-size: 11px; font-weight: bold;">LIVE</span>'
            )
        return format_html(
            '<span style="background: #6c757d; color: white; padding: 3px 10px; '
            'border-radius: 3px; font-size: 11px; font-weight: bold;">DRAFT</span>'
        )
    status_badge.short_description = "Status"

    def save_model(self, request, obj, form, change):
        if not change:
            obj.author = request.user
        super().save_model(request, obj, form, change)

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        count = queryset.update(published=True)
        self.message_user(request, f"{count} post(s) published.", messages.SUCCESS)

    @admin.action(description="Unpublish selected posts")
    def unpublish_posts(self, request, queryset):
        count = queryset.update(published=False)
        self.message_user(request, f"{count} post(s) unpublished.", messages.WARNING)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Moderation: comments can be read and deleted, not created here."""

    list_display = ["short_content", "author", "post", "created_at"]
    search_fields = ["content", "author__username", "post__title"]
    list_select_related = ["author", "post"]
    readonly_fields = ["author", "post", "created_at", "updated_at"]
    ordering = ["-created_at"]

    @cached_property
    def comment_service(self):
        from inkwell.container import build_container
        return build_container().comment_service

    def has_add_permission(self, request):
        return False

    def short_content(self, obj):
        return obj.content[:60]
    short_content.short_description = "Comment"

    def delete_model(self, request, obj):
        post_id = obj.post_id
        super().delete_model(request, obj)
        self.comment_service.sync_comments_count(post_id)

    def delete_queryset(self, request, queryset):
        post_ids = set(queryset.values_list("post_id", flat=True))
        super().delete_queryset(request, queryset)
        for post_id in post_ids:
            self.comment_service.sync_comments_count(post_id)
