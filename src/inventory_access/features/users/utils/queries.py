"""User SQL query constants."""

USER_SELECT_BY_USERNAME = """
    SELECT id, username, is_admin, is_active
    FROM users
    WHERE LOWER(username) = LOWER($1)
"""

USER_SELECT_BY_ID = """
    SELECT id, username, is_admin, is_active
    FROM users
    WHERE id = $1
"""
