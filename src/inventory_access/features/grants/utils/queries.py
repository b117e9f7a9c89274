"""All-access grant SQL query constants."""

_GRANT_COLUMNS = """
    g.id, g.grantor_user_id, g.grantee_user_id, g.created_at, g.updated_at,
    gr.username AS grantor_username,
    ge.username AS grantee_username
"""

_GRANT_JOINS = """
    JOIN users gr ON gr.id = g.grantor_user_id
    JOIN users ge ON ge.id = g.grantee_user_id
"""

GRANT_INSERT = f"""
    WITH g AS (
        INSERT INTO user_access_grants (grantor_user_id, grantee_user_id)
        VALUES ($1, $2)
        RETURNING *
    )
    SELECT {_GRANT_COLUMNS}
    FROM g
    {_GRANT_JOINS}
"""

GRANT_SELECT_BY_ID = f"""
    SELECT {_GRANT_COLUMNS}
    FROM user_access_grants g
    {_GRANT_JOINS}
    WHERE g.id = $1
"""

GRANT_EXISTS = """
    SELECT EXISTS(
        SELECT 1 FROM user_access_grants
        WHERE grantor_user_id = $1 AND grantee_user_id = $2
    )
"""

GRANT_DELETE = """
    DELETE FROM user_access_grants WHERE id = $1
"""

GRANT_LIST_GIVEN = f"""
    SELECT {_GRANT_COLUMNS}
    FROM user_access_grants g
    {_GRANT_JOINS}
    WHERE g.grantor_user_id = $1
    ORDER BY g.created_at DESC
"""

GRANT_LIST_RECEIVED = f"""
    SELECT {_GRANT_COLUMNS}
    FROM user_access_grants g
    {_GRANT_JOINS}
    WHERE g.grantee_user_id = $1
    ORDER BY g.created_at DESC
"""
