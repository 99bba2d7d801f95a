"""Shared SQL queries for session and login handling."""


def sql_select_user_capabilities() -> str:
    """Get all capabilities for a user through their roles."""
    return """
        SELECT DISTINCT c.cap_name
        FROM capabilities c
        JOIN rolecapabilities rc ON rc.capabilityid = c.id
        JOIN userroles ur ON ur.roleid = rc.roleid
        WHERE ur.userid = %(user_id)s
    """


def sql_select_session_user() -> str:
    """Get a session together with its user."""
    return """
        SELECT
            s.expires,
            s.inactive,
            u.id,
            u.username,
            u.full_name,
            u.inactive AS user_inactive
        FROM sessions s
        JOIN users u ON u.id = s.userid
        WHERE s.id = %(session_id)s
    """


def sql_select_login_user() -> str:
    """Get a user by username for password verification."""
    return """
        SELECT id, username, full_name, pwhash, inactive
        FROM users
        WHERE username = %(username)s
    """


def sql_insert_session() -> str:
    return """
        INSERT INTO sessions (id, userid, issued, expires)
        VALUES (%(id)s, %(userid)s, %(issued)s, %(expires)s)
    """


def sql_deactivate_session() -> str:
    return "UPDATE sessions SET inactive = true WHERE id = %(id)s"


def sql_update_user_pwhash() -> str:
    return "UPDATE users SET pwhash = %(pwhash)s WHERE id = %(id)s"
