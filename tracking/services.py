"""
Tracking Service
================

Business logic behind the tracking endpoints: registration, open/click
recording, engagement stats and contact segments.

The database alias and the repositories are injected, so tests (or a
second store) can swap them without touching module state::

    service = TrackingService(using="default")
    registration = service.register("ada@example.com", name="Ada")
    service.record_open(registration.tracking_id)
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import DEFAULT_DB_ALIAS, DatabaseError
from django.urls import reverse
from django.utils import timezone

from core.exceptions import PersistenceError, ValidationError
from core.services import BaseService
from .models import Contact
from .repositories import ContactRepository, TrackingRecordRepository


@dataclass(frozen=True)
class Registration:
    """Result of a successful ``register`` call."""

    tracking_id: str
    contact: Contact
    created: bool


@dataclass(frozen=True)
class TrackingOutcome:
    """
    Result of an open/click recording.

    The beacon views never let this reach the caller: a ``failed`` or
    ``unknown`` outcome still gets the pixel or the redirect.
    """

    RECORDED = "recorded"
    UNKNOWN = "unknown"
    FAILED = "failed"

    status: str
    tracking_id: str
    error: Optional[Exception] = None

    @property
    def recorded(self) -> bool:
        return self.status == self.RECORDED


def normalize_email(email) -> str:
    """Trim and lowercase; ``None`` becomes an empty string."""
    return (email or "").strip().lower()


def format_rate(part: int, total: int) -> str:
    """Percentage with one decimal place, ``"0%"`` for an empty denominator."""
    if not total:
        return "0%"
    return f"{(part / total) * 100:.1f}%"


class TrackingService(BaseService):
    """Registration, engagement recording and reporting."""

    OPEN = "open"
    CLICK = "click"

    def __init__(
        self,
        using: str = DEFAULT_DB_ALIAS,
        contacts=ContactRepository,
        records=TrackingRecordRepository,
        site_url: Optional[str] = None,
    ):
        super().__init__(using=using)
        self.contacts = contacts
        self.records = records
        self.site_url = (site_url or getattr(settings, "SITE_URL", "")).rstrip("/")

    # ── Registration ─────────────────────────────────────────────────

    def register(self, email, name=None, campaign=None) -> Registration:
        """
        Upsert the contact for ``email`` and issue a new tracking id.

        Both writes share one transaction: a failed record insert leaves
        no contact change behind, and vice versa.

        Raises:
            ValidationError: email missing or malformed
            PersistenceError: any store failure (transaction rolled back)
        """
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required", field="email")
        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError("Please enter a valid email", field="email")

        name = (name or "").strip() or None
        campaign = (campaign or "").strip() or None

        try:
            with self.atomic():
                contact, created = self.contacts.upsert_by_email(
                    email, name=name, using=self.using
                )
                record = self.records.create_for(
                    contact, campaign=campaign, using=self.using
                )
        except DatabaseError as e:
            self.logger.error("Register failed for %s: %s", email, e)
            raise PersistenceError("Failed to register email", reason=str(e))

        self.logger.info(
            "Registered %s (%s contact) tracking_id=%s campaign=%s",
            email,
            "new" if created else "existing",
            record.tracking_id,
            campaign or "-",
        )
        return Registration(tracking_id=record.tracking_id, contact=contact, created=created)

    # ── Engagement ───────────────────────────────────────────────────

    def record_open(self, tracking_id: str) -> TrackingOutcome:
        """Mark the record and its contact as opened. Never raises on store errors."""
        return self._record(tracking_id, self.OPEN)

    def record_click(self, tracking_id: str) -> TrackingOutcome:
        """Mark the record and its contact as clicked. Never raises on store errors."""
        return self._record(tracking_id, self.CLICK)

    def _record(self, tracking_id: str, event: str) -> TrackingOutcome:
        # The record row stays locked until the contact cascade commits, so
        # concurrent hits on one id serialize and readers never see half of it.
        try:
            with self.atomic():
                record = self.records.lock_by_tracking_id(tracking_id, using=self.using)
                if record is None:
                    self.logger.debug("Unknown tracking id on %s: %s", event, tracking_id)
                    return TrackingOutcome(TrackingOutcome.UNKNOWN, tracking_id)

                now = timezone.now()
                if event == self.OPEN:
                    self.records.mark_opened(record, now, using=self.using)
                else:
                    self.records.mark_clicked(record, now, using=self.using)
        except DatabaseError as e:
            self.logger.warning("Failed to record %s for %s: %s", event, tracking_id, e)
            return TrackingOutcome(TrackingOutcome.FAILED, tracking_id, error=e)

        return TrackingOutcome(TrackingOutcome.RECORDED, tracking_id)

    # ── Reporting ────────────────────────────────────────────────────

    def stats(self) -> dict:
        """
        Aggregate engagement over all contacts.

        Returns:
            dict with total, opened, clicked, openRate, clickRate
        """
        try:
            counts = self.contacts.engagement_counts(using=self.using)
        except DatabaseError as e:
            self.logger.error("Stats query failed: %s", e)
            raise PersistenceError("Failed to retrieve statistics", reason=str(e))

        total = counts["total"]
        return {
            "total": total,
            "opened": counts["opened"],
            "clicked": counts["clicked"],
            "openRate": format_rate(counts["opened"], total),
            "clickRate": format_rate(counts["clicked"], total),
        }

    def filter_contacts(self, kind: Optional[str] = None) -> list:
        """
        Contacts in an engagement segment.

        ``clicked``: clicked; ``opened``: opened but not clicked;
        ``inactive``: never opened; anything else: every contact.
        """
        try:
            return list(self.contacts.filter_by_engagement(kind, using=self.using))
        except DatabaseError as e:
            self.logger.error("Contact filter '%s' failed: %s", kind, e)
            raise PersistenceError("Failed to filter contacts", reason=str(e))

    # ── Beacon URLs ──────────────────────────────────────────────────

    def pixel_url(self, tracking_id: str) -> str:
        """Absolute URL of the open pixel for embedding in outgoing mail."""
        return self.site_url + reverse("tracking:open", args=[tracking_id])

    def click_url(self, tracking_id: str, url: Optional[str] = None) -> str:
        """Absolute click-redirect URL; ``url`` is appended as the destination."""
        base = self.site_url + reverse("tracking:click", args=[tracking_id])
        if url:
            return f"{base}?{urlencode({'url': url})}"
        return base


def get_tracking_service(using: str = DEFAULT_DB_ALIAS) -> TrackingService:
    """Service bound to the given database alias; views resolve it per request."""
    return TrackingService(using=using)
