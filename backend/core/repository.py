"""Contact persistence: the repository protocol and its PostgreSQL implementation."""

from typing import Any, Protocol, runtime_checkable

import psycopg
from litestar.exceptions import HTTPException

import core.db as db
from core.models import Contact, ContactStatus


# ---------------------------------------------------------------------------
# SQL Queries
# ---------------------------------------------------------------------------


CONTACT_COLUMNS_SQL = """
    contact_id, owner_id, name, address, city, state, zip, email, status
"""


def sql_select_contacts() -> str:
    """List every contact."""
    return f"""
        SELECT {CONTACT_COLUMNS_SQL}
        FROM contacts
        ORDER BY contact_id
    """


def sql_select_contact_by_id() -> str:
    """Get a single contact."""
    return f"""
        SELECT {CONTACT_COLUMNS_SQL}
        FROM contacts
        WHERE contact_id = %(contact_id)s
    """


def sql_insert_contact() -> str:
    """Create a contact and return the stored row."""
    return f"""
        INSERT INTO contacts (
            owner_id, name, address, city, state, zip, email, status
        )
        VALUES (
            %(owner_id)s, %(name)s, %(address)s, %(city)s, %(state)s,
            %(zip)s, %(email)s, %(status)s
        )
        RETURNING {CONTACT_COLUMNS_SQL}
    """


def sql_update_contact() -> str:
    """Update the editable fields and status. owner_id is never written."""
    return """
        UPDATE contacts
        SET name = %(name)s,
            address = %(address)s,
            city = %(city)s,
            state = %(state)s,
            zip = %(zip)s,
            email = %(email)s,
            status = %(status)s
        WHERE contact_id = %(contact_id)s
    """


def sql_delete_contact() -> str:
    """Delete a contact."""
    return "DELETE FROM contacts WHERE contact_id = %(contact_id)s"


def contact_from_row(row: dict[str, Any]) -> Contact:
    return Contact(
        contact_id=row["contact_id"],
        owner_id=str(row["owner_id"]),
        name=row["name"] or "",
        address=row["address"] or "",
        city=row["city"] or "",
        state=row["state"] or "",
        zip=row["zip"] or "",
        email=row["email"] or "",
        status=ContactStatus(row["status"]),
    )


@runtime_checkable
class ContactRepository(Protocol):
    """Stores and retrieves contacts by primary key."""

    async def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    async def list_all(self) -> list[Contact]:
        """Return every contact ordered by id."""
        ...

    async def insert(self, contact: Contact) -> Contact:
        """Store a new contact and return it with its assigned id."""
        ...

    async def update(self, contact: Contact) -> int:
        """Write the contact's editable fields and status; return rows affected."""
        ...

    async def delete(self, contact_id: int) -> int:
        """Delete the contact; return rows affected."""
        ...


class PostgresContactRepository:
    """ContactRepository over a single request-scoped psycopg connection."""

    def __init__(self, conn: psycopg.AsyncConnection) -> None:
        self.conn = conn

    async def get_by_id(self, contact_id: int) -> Contact | None:
        row = await db.fetch_one(
            self.conn, sql_select_contact_by_id(), {"contact_id": contact_id}
        )
        return contact_from_row(row) if row else None

    async def list_all(self) -> list[Contact]:
        rows = await db.fetch_all(self.conn, sql_select_contacts())
        return [contact_from_row(row) for row in rows]

    async def insert(self, contact: Contact) -> Contact:
        row = await db.execute_returning(self.conn, sql_insert_contact(), contact.to_row())
        if not row:
            raise HTTPException(status_code=500, detail="Failed to create contact")
        return contact_from_row(row)

    async def update(self, contact: Contact) -> int:
        return await db.execute(self.conn, sql_update_contact(), contact.to_row())

    async def delete(self, contact_id: int) -> int:
        return await db.execute(self.conn, sql_delete_contact(), {"contact_id": contact_id})


async def provide_contact_repository(conn: psycopg.AsyncConnection) -> ContactRepository:
    """Litestar dependency provider for the contacts repository."""
    return PostgresContactRepository(conn)
