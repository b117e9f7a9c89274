"""Inventory share SQL query constants.

Reads join ``users`` twice so responses can carry both usernames.
"""

_SHARE_COLUMNS = """
    s.id, s.inventory_id, s.shared_with_user_id, s.shared_by_user_id,
    s.permission_level, s.created_at, s.updated_at,
    sw.username AS shared_with_username,
    sb.username AS shared_by_username
"""

_SHARE_JOINS = """
    JOIN users sw ON sw.id = s.shared_with_user_id
    JOIN users sb ON sb.id = s.shared_by_user_id
"""

SHARE_INSERT = f"""
    WITH s AS (
        INSERT INTO inventory_shares (
            inventory_id, shared_with_user_id, shared_by_user_id, permission_level
        ) VALUES ($1, $2, $3, $4)
        RETURNING *
    )
    SELECT {_SHARE_COLUMNS}
    FROM s
    {_SHARE_JOINS}
"""

SHARE_SELECT_BY_ID = f"""
    SELECT {_SHARE_COLUMNS}
    FROM inventory_shares s
    {_SHARE_JOINS}
    WHERE s.id = $1
"""

SHARE_SELECT_FOR_USER = f"""
    SELECT {_SHARE_COLUMNS}
    FROM inventory_shares s
    {_SHARE_JOINS}
    WHERE s.inventory_id = $1 AND s.shared_with_user_id = $2
"""

SHARE_SELECT_LEVEL = """
    SELECT permission_level
    FROM inventory_shares
    WHERE inventory_id = $1 AND shared_with_user_id = $2
"""

SHARE_UPDATE_LEVEL = f"""
    WITH s AS (
        UPDATE inventory_shares
        SET permission_level = $2, updated_at = NOW()
        WHERE id = $1
        RETURNING *
    )
    SELECT {_SHARE_COLUMNS}
    FROM s
    {_SHARE_JOINS}
"""

SHARE_DELETE = """
    DELETE FROM inventory_shares WHERE id = $1
"""

SHARE_DELETE_BY_INVENTORY = """
    DELETE FROM inventory_shares WHERE inventory_id = $1
"""

SHARE_LIST_BY_INVENTORY = f"""
    SELECT {_SHARE_COLUMNS}
    FROM inventory_shares s
    {_SHARE_JOINS}
    WHERE s.inventory_id = $1
    ORDER BY s.created_at DESC
"""

SHARE_LIST_GIVEN = f"""
    SELECT {_SHARE_COLUMNS}
    FROM inventory_shares s
    {_SHARE_JOINS}
    JOIN inventories i ON i.id = s.inventory_id
    WHERE i.user_id = $1
    ORDER BY s.created_at DESC
"""

SHARE_LIST_RECEIVED = f"""
    SELECT {_SHARE_COLUMNS}
    FROM inventory_shares s
    {_SHARE_JOINS}
    WHERE s.shared_with_user_id = $1
    ORDER BY s.created_at DESC
"""
