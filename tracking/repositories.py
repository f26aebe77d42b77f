"""
Tracking Repositories
=====================

Data-access layer for Contact and TrackingRecord models.
"""

from datetime import datetime
from typing import Optional

from django.db import DEFAULT_DB_ALIAS
from django.db.models import Count, Q, QuerySet
from django.utils import timezone

from core.repositories import BaseRepository
from .models import Contact, TrackingRecord


# Contact segments for /contacts/filter; unknown keys mean "all contacts"
ENGAGEMENT_FILTERS = {
    "clicked": Q(clicked=True),
    "opened": Q(opened=True, clicked=False),
    "inactive": Q(opened=False),
}


class ContactRepository(BaseRepository[Contact]):
    """Contact data access."""

    model = Contact

    @classmethod
    def upsert_by_email(cls, email: str, name: Optional[str] = None,
                        using: str = DEFAULT_DB_ALIAS) -> tuple:
        """
        Create the contact for ``email`` or refresh its name in place.

        Engagement flags of an existing contact are left untouched.
        Must run inside a transaction; the row is locked until commit.

        Returns:
            (contact, created) tuple
        """
        contact, created = cls.manager(using).select_for_update().get_or_create(
            email=email,
            defaults={"name": name},
        )
        if not created and name and contact.name != name:
            # update_fields bypasses auto_now unless the field is listed
            cls.update(contact, using=using, name=name, updated_at=timezone.now())
        return contact, created

    @classmethod
    def engagement_counts(cls, using: str = DEFAULT_DB_ALIAS) -> dict:
        """Total, opened and clicked contact counts in one query."""
        return cls.manager(using).aggregate(
            total=Count("id"),
            opened=Count("id", filter=Q(opened=True)),
            clicked=Count("id", filter=Q(clicked=True)),
        )

    @classmethod
    def filter_by_engagement(cls, kind: Optional[str],
                             using: str = DEFAULT_DB_ALIAS) -> QuerySet:
        """Contacts in the ``clicked``/``opened``/``inactive`` segment, or all."""
        condition = ENGAGEMENT_FILTERS.get((kind or "").lower())
        if condition is None:
            return cls.get_all(using=using)
        return cls.manager(using).filter(condition)

    @classmethod
    def mark_opened(cls, contact_id, when: datetime, using: str = DEFAULT_DB_ALIAS) -> int:
        return cls.manager(using).filter(pk=contact_id).update(
            opened=True,
            last_opened_at=when,
            updated_at=when,
        )

    @classmethod
    def mark_clicked(cls, contact_id, when: datetime, using: str = DEFAULT_DB_ALIAS) -> int:
        return cls.manager(using).filter(pk=contact_id).update(
            clicked=True,
            last_clicked_at=when,
            updated_at=when,
        )


class TrackingRecordRepository(BaseRepository[TrackingRecord]):
    """Issued tracking id data access."""

    model = TrackingRecord

    @classmethod
    def create_for(cls, contact: Contact, campaign: Optional[str] = None,
                   using: str = DEFAULT_DB_ALIAS) -> TrackingRecord:
        """Issue a fresh tracking record for ``contact``."""
        return cls.create(using=using, contact=contact, campaign=campaign)

    @classmethod
    def lock_by_tracking_id(cls, tracking_id: str,
                            using: str = DEFAULT_DB_ALIAS) -> Optional[TrackingRecord]:
        """
        Get a record by tracking ID with its row locked (``SELECT ... FOR UPDATE``).
        Must run inside a transaction.
        """
        return cls.manager(using).select_for_update().filter(tracking_id=tracking_id).first()

    @classmethod
    def mark_opened(cls, record: TrackingRecord, when: datetime,
                    using: str = DEFAULT_DB_ALIAS) -> None:
        """Record an open on the record and cascade it to its contact."""
        cls.manager(using).filter(pk=record.pk).update(opened_at=when)
        ContactRepository.mark_opened(record.contact_id, when, using=using)
        record.opened_at = when

    @classmethod
    def mark_clicked(cls, record: TrackingRecord, when: datetime,
                     using: str = DEFAULT_DB_ALIAS) -> None:
        """Record a click on the record and cascade it to its contact."""
        cls.manager(using).filter(pk=record.pk).update(clicked_at=when)
        ContactRepository.mark_clicked(record.contact_id, when, using=using)
        record.clicked_at = when
