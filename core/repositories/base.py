"""
Generic Base Repository
=======================

Type-safe, generic repository providing standard CRUD operations.
All app-specific repositories inherit from this.

Repositories are plain instances: they are built once when the process
starts (see ``inkwell.container``) and handed to the services that need
them, so tests can swap in their own.

Usage:
    from core.repositories import BaseRepository
    from myapp.models import MyModel

    class MyRepository(BaseRepository[MyModel]):
        model = MyModel

        def get_active(self):
            return self.model.objects.filter(is_active=True)
"""

from typing import TypeVar, Generic, Type, Optional, Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models
from django.db.models import QuerySet

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Generic repository with standard CRUD operations.

    Subclasses MUST set the `model` class attribute:

        class CommentRepository(BaseRepository[Comment]):
            model = Comment
    """

    model: Type[T]

    # ── Read ──────────────────────────────────────────────────────────

    def queryset(self) -> QuerySet[T]:
        """Base queryset for lookups; override to add select_related etc."""
        return self.model.objects.all()

    def get_by_id_or_none(self, pk: Any) -> Optional[T]:
        """
        Get a single instance by primary key, or None.

        Malformed keys (e.g. a non-UUID string for a UUID pk) are treated
        as missing rather than as a server error.
        """
        try:
            return self.queryset().filter(pk=pk).first()
        except (DjangoValidationError, ValueError, TypeError):
            return None

    def exists(self, **kwargs) -> bool:
        """Check if at least one instance matches the given filters."""
        return self.model.objects.filter(**kwargs).exists()

    def count(self, **kwargs) -> int:
        """Count instances matching the given filters (all if no filters)."""
        if kwargs:
            return self.model.objects.filter(**kwargs).count()
        return self.model.objects.count()

    # ── Write ─────────────────────────────────────────────────────────

    def create(self, **kwargs) -> T:
        """Create and return a new instance."""
        return self.model.objects.create(**kwargs)

    def update(self, instance: T, **kwargs) -> T:
        """Update fields on an existing instance and save."""
        for field, value in kwargs.items():
            setattr(instance, field, value)
        instance.save()
        return instance

    def delete(self, instance: T) -> None:
        """Delete a single instance."""
        instance.delete()
