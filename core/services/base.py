"""
Base Service
=============

Use cases live in services. Views parse and serialize; repositories talk
to the ORM; services sit between and own logging and transactions.
"""

import logging

from django.db import transaction


class BaseService:
    """
    Parent of every service class.

    Services are instances built once per process with their repositories
    passed in::

        class PostService(BaseService):
            def __init__(self, posts, gate):
                self.posts = posts
                self.gate = gate

    ``self.logger`` is named after the subclass's module, so
    ``blog.services.posts`` logs under the ``blog`` logger tree.
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(cls.__module__)

    @staticmethod
    def atomic():
        """``transaction.atomic()``; nests as a savepoint inside an open transaction."""
        return transaction.atomic()
