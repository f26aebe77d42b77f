"""
Generic Base Repository
=======================

Type-safe, generic repository providing standard CRUD operations.
App repositories inherit from this.

Every method takes the database alias to run against (``using``), so the
caller decides which store connection a query goes through.

Usage:
    from core.repositories import BaseRepository
    from tracking.models import Contact

    class ContactRepository(BaseRepository[Contact]):
        model = Contact

        @classmethod
        def get_opened(cls, using="default"):
            return cls.manager(using).filter(opened=True)
"""

from typing import TypeVar, Generic, Type
from django.db import DEFAULT_DB_ALIAS, models
from django.db.models import QuerySet

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Generic repository with standard CRUD operations.

    Subclasses MUST set the `model` class attribute:

        class TrackingRecordRepository(BaseRepository[TrackingRecord]):
            model = TrackingRecord
    """

    model: Type[T]

    @classmethod
    def manager(cls, using: str = DEFAULT_DB_ALIAS) -> QuerySet[T]:
        """Base queryset bound to the given database alias."""
        return cls.model.objects.using(using)

    # ── Read ──────────────────────────────────────────────────────────

    @classmethod
    def get_all(cls, using: str = DEFAULT_DB_ALIAS) -> QuerySet[T]:
        """Return all instances (respects model's default ordering)."""
        return cls.manager(using).all()

    # ── Write ─────────────────────────────────────────────────────────

    @classmethod
    def create(cls, using: str = DEFAULT_DB_ALIAS, **kwargs) -> T:
        """Create and return a new instance."""
        return cls.manager(using).create(**kwargs)

    @classmethod
    def update(cls, instance: T, using: str = DEFAULT_DB_ALIAS, **kwargs) -> T:
        """Update fields on an existing instance and save."""
        for field, value in kwargs.items():
            setattr(instance, field, value)
        instance.save(using=using, update_fields=list(kwargs.keys()))
        return instance
