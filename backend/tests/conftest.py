from dataclasses import replace

import pytest
from litestar.di import Provide
from litestar.testing import create_test_client
from litestar.types import ASGIApp, Receive, Scope, Send

from api.contacts import ContactsController
from core.auth import APPROVER_CAPABILITY, AuthenticatedUser, provide_current_user
from core.models import Contact, ContactStatus


ALICE = AuthenticatedUser(id="u-alice", username="alice", full_name="Alice Moreno")
BOB = AuthenticatedUser(id="u-bob", username="bob", full_name="Bob Tanaka")
MANAGER = AuthenticatedUser(
    id="u-manager",
    username="manager",
    full_name="Contact Manager",
    capabilities={APPROVER_CAPABILITY},
)

USERS = {user.username: user for user in (ALICE, BOB, MANAGER)}


class InMemoryContactRepository:
    """ContactRepository kept in a dict; hands out copies like a real store would."""

    def __init__(self) -> None:
        self.rows: dict[int, Contact] = {}
        self.next_id = 1

    def add(self, contact: Contact) -> Contact:
        stored = replace(contact, contact_id=self.next_id)
        self.rows[stored.contact_id] = stored
        self.next_id += 1
        return replace(stored)

    async def get_by_id(self, contact_id: int) -> Contact | None:
        contact = self.rows.get(contact_id)
        return replace(contact) if contact else None

    async def list_all(self) -> list[Contact]:
        return [replace(self.rows[key]) for key in sorted(self.rows)]

    async def insert(self, contact: Contact) -> Contact:
        return self.add(contact)

    async def update(self, contact: Contact) -> int:
        if contact.contact_id not in self.rows:
            return 0
        self.rows[contact.contact_id] = replace(contact)
        return 1

    async def delete(self, contact_id: int) -> int:
        return 1 if self.rows.pop(contact_id, None) else 0


def header_user_middleware(app: ASGIApp) -> ASGIApp:
    """Stand-in for SessionMiddleware: the X-User header names the principal."""

    async def middleware(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = dict(scope.get("headers", []))
            username = headers.get(b"x-user", b"").decode()
            if username in USERS:
                scope["user"] = USERS[username]
        await app(scope, receive, send)

    return middleware


def as_user(user: AuthenticatedUser) -> dict[str, str]:
    return {"X-User": user.username}


@pytest.fixture
def repo():
    repo = InMemoryContactRepository()
    # 1: Alice's approved contact, 2: Alice's pending one, 3: Bob's pending one
    repo.add(
        Contact(
            owner_id=ALICE.id,
            name="Jane Doe",
            address="742 Evergreen Terrace",
            city="Springfield",
            state="IL",
            zip="62704",
            email="jane@example.com",
            status=ContactStatus.APPROVED,
        )
    )
    repo.add(
        Contact(
            owner_id=ALICE.id,
            name="Thorsten Weinrich",
            city="Redmond",
            email="thorsten@example.com",
        )
    )
    repo.add(
        Contact(
            owner_id=BOB.id,
            name="Yuhong Li",
            city="Redmond",
            email="yuhong@example.com",
        )
    )
    return repo


@pytest.fixture
def client(repo):
    with create_test_client(
        route_handlers=[ContactsController],
        dependencies={
            "contacts": Provide(lambda: repo, sync_to_thread=False),
            "current_user": Provide(provide_current_user),
        },
        middleware=[header_user_middleware],
    ) as client:
        yield client
