"""Repository for the session_state key/value table."""

import sqlite3


def get_session_value(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM session_state WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_session_value(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Insert or overwrite a value. Rows are never deleted."""
    conn.execute(
        "INSERT INTO session_state (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def get_all_session_values(conn: sqlite3.Connection) -> dict[str, str]:
    rows = conn.execute("SELECT key, value FROM session_state").fetchall()
    return {r[0]: r[1] for r in rows}
