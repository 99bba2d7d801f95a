"""Seed data for users table with sample users."""

from core.password import hash_password

# Development password for every seeded user
DEV_PASSWORD = "contacts-dev"

ADMIN_USER_ID = "00000000-0000-0000-0000-000000000001"
MANAGER_USER_ID = "00000000-0000-0000-0000-000000000002"
ALICE_USER_ID = "00000000-0000-0000-0000-000000000003"
BOB_USER_ID = "00000000-0000-0000-0000-000000000004"

# Sample users with their roles
SAMPLE_USERS = [
    {
        "id": ADMIN_USER_ID,
        "username": "admin",
        "full_name": "System Administrator",
        "descr": "Approves contacts, full access",
        "roles": ["Administrator"],
    },
    {
        "id": MANAGER_USER_ID,
        "username": "manager",
        "full_name": "Contact Manager",
        "descr": "Reviews and approves submitted contacts",
        "roles": ["Manager"],
    },
    {
        "id": ALICE_USER_ID,
        "username": "alice",
        "full_name": "Alice Moreno",
        "descr": "Submits contacts",
        "roles": ["User"],
    },
    {
        "id": BOB_USER_ID,
        "username": "bob",
        "full_name": "Bob Tanaka",
        "descr": "Submits contacts",
        "roles": ["User"],
    },
]


async def seed_users(conn) -> None:
    """Insert sample users with role assignments."""
    pwhash = hash_password(DEV_PASSWORD)

    async with conn.cursor() as cur:
        for user in SAMPLE_USERS:
            user_id = user["id"]
            await cur.execute(
                "SELECT id FROM users WHERE id = %(id)s",
                {"id": user_id},
            )
            if await cur.fetchone():
                print(f"User already exists: {user['username']}")
            else:
                await cur.execute(
                    """
                    INSERT INTO users (id, username, full_name, descr, pwhash)
                    VALUES (%(id)s, %(username)s, %(full_name)s, %(descr)s, %(pwhash)s)
                    """,
                    {
                        "id": user_id,
                        "username": user["username"],
                        "full_name": user["full_name"],
                        "descr": user["descr"],
                        "pwhash": pwhash,
                    },
                )
                print(f"Created user: {user['username']} (id: {user_id})")

            for role_name in user.get("roles", []):
                await cur.execute(
                    "SELECT id FROM roles WHERE role_name = %(role_name)s",
                    {"role_name": role_name},
                )
                role_row = await cur.fetchone()
                if not role_row:
                    print(f"  Warning: Role not found: {role_name}")
                    continue

                await cur.execute(
                    """
                    INSERT INTO userroles (userid, roleid)
                    VALUES (%(user_id)s, %(role_id)s)
                    ON CONFLICT (userid, roleid) DO NOTHING
                    """,
                    {"user_id": user_id, "role_id": role_row[0]},
                )


async def clear_users(conn) -> None:
    """Remove all seeded users and their sessions."""
    user_ids = [user["id"] for user in SAMPLE_USERS]
    async with conn.cursor() as cur:
        await cur.execute(
            "DELETE FROM userroles WHERE userid = ANY(%(ids)s)",
            {"ids": user_ids},
        )
        print("Cleared user-role mappings for seeded users")

        await cur.execute(
            "DELETE FROM sessions WHERE userid = ANY(%(ids)s)",
            {"ids": user_ids},
        )
        print("Cleared sessions for seeded users")

        await cur.execute(
            "DELETE FROM users WHERE id = ANY(%(ids)s)",
            {"ids": user_ids},
        )
        print("Cleared seeded users")
