"""Seed data for capabilities table."""

from core.auth import APPROVER_CAPABILITY

# Format: (cap_name, description)
CAPABILITIES = [
    (APPROVER_CAPABILITY, "Approve submitted contacts; edit and delete any contact"),
]


async def seed_capabilities(conn) -> None:
    """Insert capabilities if not exists."""
    async with conn.cursor() as cur:
        for cap_name, description in CAPABILITIES:
            await cur.execute(
                "SELECT id FROM capabilities WHERE cap_name = %(cap_name)s",
                {"cap_name": cap_name},
            )
            if await cur.fetchone():
                print(f"Capability already exists: {cap_name}")
                continue

            await cur.execute(
                """
                INSERT INTO capabilities (cap_name, description)
                VALUES (%(cap_name)s, %(description)s)
                """,
                {"cap_name": cap_name, "description": description},
            )
            print(f"Created capability: {cap_name}")


async def clear_capabilities(conn) -> None:
    """Remove all seeded capabilities."""
    async with conn.cursor() as cur:
        # First remove role-capability mappings
        await cur.execute("DELETE FROM rolecapabilities")
        print("Cleared role-capability mappings")

        await cur.execute("DELETE FROM capabilities")
        print("Cleared capabilities")
