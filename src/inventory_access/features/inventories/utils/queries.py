"""Inventory and item SQL query constants.

The store keeps the owner in ``user_id`` on both tables; queries expose it
as ``owner_user_id``.
"""

INVENTORY_SELECT_BY_ID = """
    SELECT id, user_id AS owner_user_id, name
    FROM inventories
    WHERE id = $1
"""

INVENTORY_SELECT_FOR_UPDATE = """
    SELECT id, user_id AS owner_user_id, name
    FROM inventories
    WHERE id = $1
    FOR UPDATE
"""

INVENTORY_UPDATE_OWNER = """
    UPDATE inventories
    SET user_id = $2, updated_at = NOW()
    WHERE id = $1
"""

ITEMS_LOCK_BY_INVENTORY = """
    SELECT id
    FROM items
    WHERE inventory_id = $1
    FOR UPDATE
"""

ITEMS_UPDATE_OWNER = """
    UPDATE items
    SET user_id = $2, updated_at = NOW()
    WHERE inventory_id = $1
"""

INVENTORY_LIST_ACCESSIBLE = """
    SELECT DISTINCT
        i.id,
        i.user_id AS owner_user_id,
        i.name,
        s.permission_level AS share_level,
        (g.id IS NOT NULL) AS has_grant
    FROM inventories i
    LEFT JOIN inventory_shares s
        ON s.inventory_id = i.id AND s.shared_with_user_id = $1
    LEFT JOIN user_access_grants g
        ON g.grantor_user_id = i.user_id AND g.grantee_user_id = $1
    WHERE i.user_id = $1
       OR s.id IS NOT NULL
       OR g.id IS NOT NULL
    ORDER BY i.id
"""
