"""Seed data for roles table with predefined roles and capabilities."""

from core.auth import APPROVER_CAPABILITY

# Roles with sort order
ROLES = [
    ("Administrator", 1),
    ("Manager", 2),
    ("User", 3),
]

# Plain users hold no capability; they submit and maintain their own contacts
ROLE_CAPABILITIES = {
    "Administrator": [APPROVER_CAPABILITY],
    "Manager": [APPROVER_CAPABILITY],
    "User": [],
}


async def seed_roles(conn) -> None:
    """Insert roles and their capabilities if not exists."""
    async with conn.cursor() as cur:
        for role_name, sort in ROLES:
            await cur.execute(
                "SELECT id FROM roles WHERE role_name = %(role_name)s",
                {"role_name": role_name},
            )
            existing = await cur.fetchone()

            if existing:
                role_id = existing[0]
                print(f"Role already exists: {role_name}")
            else:
                await cur.execute(
                    """
                    INSERT INTO roles (role_name, sort)
                    VALUES (%(role_name)s, %(sort)s)
                    RETURNING id
                    """,
                    {"role_name": role_name, "sort": sort},
                )
                result = await cur.fetchone()
                role_id = result[0]
                print(f"Created role: {role_name}")

            for cap_name in ROLE_CAPABILITIES.get(role_name, []):
                await cur.execute(
                    "SELECT id FROM capabilities WHERE cap_name = %(cap_name)s",
                    {"cap_name": cap_name},
                )
                cap_row = await cur.fetchone()
                if not cap_row:
                    print(f"  Warning: Capability not found: {cap_name}")
                    continue

                await cur.execute(
                    """
                    INSERT INTO rolecapabilities (roleid, capabilityid)
                    VALUES (%(role_id)s, %(cap_id)s)
                    ON CONFLICT (roleid, capabilityid) DO NOTHING
                    """,
                    {"role_id": role_id, "cap_id": cap_row[0]},
                )


async def clear_roles(conn) -> None:
    """Remove all seeded roles."""
    async with conn.cursor() as cur:
        await cur.execute("DELETE FROM userroles")
        print("Cleared user-role mappings")

        await cur.execute("DELETE FROM rolecapabilities")
        print("Cleared role-capability mappings")

        await cur.execute("DELETE FROM roles")
        print("Cleared roles")
