"""
Base Service
=============

Foundation for all service classes. Provides a standardised logger
and a transaction helper bound to the service's database alias.
"""

import logging
from django.db import DEFAULT_DB_ALIAS, transaction


class BaseService:
    """
    All service classes inherit from this.

    Subclass example::

        class TrackingService(BaseService):
            def register(self, email, name=None, campaign=None):
                with self.atomic():
                    ...

    Features:
        - ``cls.logger`` — pre-configured logger using the subclass module name
        - ``self.using`` — database alias every query of the service runs on
        - ``self.atomic()`` — ``transaction.atomic()`` on that alias
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def atomic(self):
        """Shortcut for ``django.db.transaction.atomic(using=self.using)``."""
        return transaction.atomic(using=self.using)
