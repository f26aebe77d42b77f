"""
Row-lock behaviour of open/click recording.

SQLite ignores SELECT ... FOR UPDATE, so these run only against PostgreSQL:

    DATABASE_URL=postgresql://... DB_NAME=mailtrack DB_USER=... \
        python -m pytest tracking/tests/test_concurrency.py -v
"""

import threading

import pytest
from django.db import connection, transaction

from tracking.models import TrackingRecord
from tracking.services import TrackingOutcome, TrackingService

pytestmark = [
    pytest.mark.skipif(
        connection.vendor != "postgresql",
        reason="row locks need PostgreSQL",
    ),
    pytest.mark.django_db(transaction=True),
]


def run_in_thread(fn, *args):
    """Start ``fn`` on its own DB connection; the result lands in ``box``."""
    box = {}

    def target():
        try:
            box["result"] = fn(*args)
        finally:
            connection.close()

    thread = threading.Thread(target=target)
    thread.start()
    return thread, box


class TestRecordLocking:

    def test_open_waits_for_locked_record(self):
        service = TrackingService(site_url="https://track.example.com")
        tracking_id = service.register("ada@example.com").tracking_id

        with transaction.atomic():
            TrackingRecord.objects.select_for_update().get(tracking_id=tracking_id)
            thread, box = run_in_thread(service.record_open, tracking_id)
            thread.join(timeout=0.5)

            assert thread.is_alive()
            assert TrackingRecord.objects.get(tracking_id=tracking_id).opened_at is None

        thread.join(timeout=10)
        assert not thread.is_alive()
        assert box["result"].status == TrackingOutcome.RECORDED

        record = TrackingRecord.objects.select_related("contact").get(tracking_id=tracking_id)
        assert record.opened_at is not None
        assert record.contact.opened is True

    def test_parallel_open_and_click_both_land(self):
        service = TrackingService(site_url="https://track.example.com")
        tracking_id = service.register("ada@example.com").tracking_id

        workers = [
            run_in_thread(service.record_open, tracking_id),
            run_in_thread(service.record_click, tracking_id),
        ]
        for thread, _ in workers:
            thread.join(timeout=10)

        assert [box["result"].recorded for _, box in workers] == [True, True]
        record = TrackingRecord.objects.select_related("contact").get(tracking_id=tracking_id)
        assert record.opened_at is not None
        assert record.clicked_at is not None
        assert record.contact.opened is True
        assert record.contact.clicked is True
