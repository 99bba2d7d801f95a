"""Seed data for contacts in both workflow states."""

from core.models import Contact, ContactStatus
from core.repository import PostgresContactRepository
from seed.users import ALICE_USER_ID, BOB_USER_ID, SAMPLE_USERS

SEED_CONTACTS = [
    Contact(
        owner_id=ALICE_USER_ID,
        name="Jane Doe",
        address="742 Evergreen Terrace",
        city="Springfield",
        state="IL",
        zip="62704",
        email="jane.doe@example.com",
        status=ContactStatus.APPROVED,
    ),
    Contact(
        owner_id=ALICE_USER_ID,
        name="Thorsten Weinrich",
        address="5678 1st Ave W",
        city="Redmond",
        state="WA",
        zip="10999",
        email="thorsten@example.com",
        status=ContactStatus.SUBMITTED,
    ),
    Contact(
        owner_id=BOB_USER_ID,
        name="Yuhong Li",
        address="9012 State St",
        city="Redmond",
        state="WA",
        zip="10999",
        email="yuhong@example.com",
        status=ContactStatus.APPROVED,
    ),
    Contact(
        owner_id=BOB_USER_ID,
        name="Diliana Alexieva-Bosseva",
        address="1234 Main St",
        city="Redmond",
        state="WA",
        zip="10999",
        email="diliana@example.com",
        status=ContactStatus.SUBMITTED,
    ),
]


async def seed_contacts(conn) -> None:
    """Insert sample contacts unless a contact with the same email exists."""
    contacts = PostgresContactRepository(conn)
    existing = {contact.email for contact in await contacts.list_all()}

    for contact in SEED_CONTACTS:
        if contact.email in existing:
            print(f"Contact already exists: {contact.name}")
            continue
        stored = await contacts.insert(contact)
        print(f"Created contact: {stored.name} ({stored.status.value}, id: {stored.contact_id})")


async def clear_contacts(conn) -> None:
    """Remove contacts owned by seeded users."""
    owner_ids = [user["id"] for user in SAMPLE_USERS]
    async with conn.cursor() as cur:
        await cur.execute(
            "DELETE FROM contacts WHERE owner_id = ANY(%(ids)s)",
            {"ids": owner_ids},
        )
        print(f"Cleared {cur.rowcount} seeded contacts")
