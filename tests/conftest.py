"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest
from fastapi.testclient import TestClient

from bazaar.config import Settings
from bazaar.domain.model import Post
from bazaar.domain.value import AuthContext, PostId, PostKind, UserId, UserRole
from bazaar.domain.value.types import Username
from bazaar.persistence.repository.inmemory import InMemoryDatabase
from bazaar.util.jwt import create_token
from tests.di import build_test_container

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "trader", role: UserRole = UserRole.USER) -> AuthContext:
    """Helper to build an authenticated caller with a fresh ID."""
    return AuthContext(user_id=UserId(uuid4()), username=Username(username), role=role)


def make_post(
    author: AuthContext,
    kind: PostKind = PostKind.TRADE,
    title: str = "Vintage film camera",
    upvotes: int = 0,
    downvotes: int = 0,
) -> Post:
    """Helper to build a post owned by ``author``."""
    return Post(
        id=PostId(uuid4()),
        kind=kind,
        author_id=author.user_id,
        author_username=author.username,
        title=title,
        body="Works perfectly, comes with a strap",
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=datetime.now() - timedelta(days=1),
        updated_at=datetime.now() - timedelta(days=1),
    )


def auth_headers(user: AuthContext) -> dict[str, str]:
    """Bearer header for ``user``, signed with the configured secret."""
    token = create_token(
        str(user.user_id), user.username.root, user.role.value, Settings().auth
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def ledger_db() -> InMemoryDatabase:
    """In-memory store shared by every request of one E2E test."""
    return InMemoryDatabase()


@pytest.fixture
def client(ledger_db):
    """Create test client backed by in-memory persistence."""
    # Imported here so unit tests never build the module-level app
    from bazaar.interface.api.app import create_app

    app_instance = create_app(container=build_test_container(database=ledger_db))
    return TestClient(app_instance)


@pytest.fixture
def seed(ledger_db):
    """Store posts directly, as the listing service would have."""

    def _seed(*posts: Post) -> None:
        for post in posts:
            ledger_db.posts[post.kind][post.id] = post

    return _seed
