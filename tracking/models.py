"""
Email Engagement Models
"""

import secrets

from django.db import models


def generate_tracking_id() -> str:
    """128 bits of randomness, hex encoded (32 chars)."""
    return secrets.token_hex(16)


class Contact(models.Model):
    """A recipient, unique by normalized email."""

    email = models.EmailField(max_length=254, unique=True)
    name = models.CharField(max_length=200, blank=True, null=True)

    # Engagement (denormalized from tracking records for quick stats)
    opened = models.BooleanField(default=False)
    clicked = models.BooleanField(default=False)
    last_opened_at = models.DateTimeField(null=True, blank=True)
    last_clicked_at = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['opened', 'clicked'], name='contact_engagement_idx'),
        ]

    def __str__(self):
        return self.email

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)


class TrackingRecord(models.Model):
    """One issued tracking id, tied to a single registration/send."""

    tracking_id = models.CharField(
        max_length=64,
        unique=True,
        default=generate_tracking_id,
        editable=False,
    )
    contact = models.ForeignKey(
        Contact,
        on_delete=models.CASCADE,
        related_name='tracking_records'
    )
    campaign = models.CharField(max_length=200, blank=True, null=True)

    sent_at = models.DateTimeField(auto_now_add=True)
    opened_at = models.DateTimeField(null=True, blank=True)
    clicked_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-sent_at']

    def __str__(self):
        return f"{self.tracking_id} -> {self.contact.email}"
