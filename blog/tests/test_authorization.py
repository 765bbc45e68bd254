"""
Tests for the ownership gate in isolation.

Run with: python -m pytest blog/tests/test_authorization.py -v
"""

import uuid

import pytest
from django.contrib.auth.models import AnonymousUser

from blog.authorization import OwnershipGate
from blog.repositories import CommentRepository, PostRepository
from core.exceptions import AuthenticationError, AuthorizationError, NotFoundError

pytestmark = pytest.mark.django_db


@pytest.fixture
def gate():
    return OwnershipGate(PostRepository(), resource="post")


def test_owner_gets_instance(gate, post, user):
    assert gate.check(post.pk, user) == post


def test_anonymous_rejected_before_lookup(gate):
    with pytest.raises(AuthenticationError):
        gate.check(uuid.uuid4(), AnonymousUser())


def test_missing_resource(gate, user):
    with pytest.raises(NotFoundError) as exc_info:
        gate.check(uuid.uuid4(), user)
    assert exc_info.value.message == "Post not found"


def test_malformed_id_is_missing(gate, user):
    with pytest.raises(NotFoundError):
        gate.check("definitely-not-a-uuid", user)


def test_other_user_denied(gate, post, other_user):
    with pytest.raises(AuthorizationError) as exc_info:
        gate.check(post.pk, other_user)
    assert exc_info.value.message == "Access denied. You can only modify your own posts."


def test_same_gate_guards_comments(post, user, other_user):
    comment = post.comments.create(author=user, content="Mine")
    gate = OwnershipGate(CommentRepository(), resource="comment")

    assert gate.check(comment.pk, user) == comment
    with pytest.raises(AuthorizationError):
        gate.check(comment.pk, other_user)
