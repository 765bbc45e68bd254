"""
Ownership Gate
==============

Precondition for every post/comment mutation: the acting user must be the
resource's author. The gate is parameterized by repository, so the same
check protects both posts and comments, and it hands back the loaded
instance so callers don't fetch it twice.
"""

import logging

from core.exceptions import AuthenticationError, AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


class OwnershipGate:
    """
    Usage::

        gate = OwnershipGate(post_repo, resource="post")
        post = gate.check(post_id, request.user)   # raises 401/403/404
    """

    def __init__(self, repository, resource: str):
        self.repository = repository
        self.resource = resource

    def check(self, resource_id, user):
        """
        Return the resource if ``user`` authored it.

        Raises:
            AuthenticationError: no authenticated user
            NotFoundError: no resource with that id
            AuthorizationError: resource belongs to someone else
        """
        if user is None or not user.is_authenticated:
            raise AuthenticationError()

        instance = self.repository.get_by_id_or_none(resource_id)
        if instance is None:
            raise NotFoundError(f"{self.resource.capitalize()} not found", resource=self.resource)

        if instance.author_id != user.pk:
            logger.info(
                "User %s denied access to %s %s owned by %s",
                user.pk, self.resource, resource_id, instance.author_id,
            )
            raise AuthorizationError(
                f"Access denied. You can only modify your own {self.resource}s."
            )

        return instance
