"""Tables used by the application, created if missing."""

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id uuid PRIMARY KEY,
        username text NOT NULL UNIQUE,
        full_name text,
        descr text,
        pwhash text,
        inactive boolean NOT NULL DEFAULT false
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS sessions (
        id uuid PRIMARY KEY,
        userid uuid NOT NULL REFERENCES users(id),
        issued timestamp NOT NULL,
        expires timestamp,
        inactive boolean NOT NULL DEFAULT false
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS roles (
        id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
        role_name text NOT NULL UNIQUE,
        sort integer
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS capabilities (
        id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
        cap_name text NOT NULL UNIQUE,
        description text
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS rolecapabilities (
        roleid uuid NOT NULL REFERENCES roles(id),
        capabilityid uuid NOT NULL REFERENCES capabilities(id),
        PRIMARY KEY (roleid, capabilityid)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS userroles (
        userid uuid NOT NULL REFERENCES users(id),
        roleid uuid NOT NULL REFERENCES roles(id),
        PRIMARY KEY (userid, roleid)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS contacts (
        contact_id serial PRIMARY KEY,
        owner_id text NOT NULL,
        name text NOT NULL,
        address text,
        city text,
        state text,
        zip text,
        email text,
        status text NOT NULL DEFAULT 'Submitted'
            CHECK (status IN ('Submitted', 'Approved'))
    )
    """,
]


async def ensure_schema(conn) -> None:
    """Create any missing tables."""
    async with conn.cursor() as cur:
        for statement in SCHEMA_STATEMENTS:
            await cur.execute(statement)
    print(f"Schema checked ({len(SCHEMA_STATEMENTS)} tables)")
