from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from mysql.connector import errorcode

from .connection import DatabaseConnection

_DUPLICATE_KEY_RE = re.compile(r"for key '([^']+)'")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def duplicate_key_name(error: Exception) -> Optional[str]:
    """Return the unique key a MySQL duplicate-entry error fired on.

    MySQL reports ``Duplicate entry 'x' for key 'submissions.uq_name'`` (8.0)
    or ``... for key 'uq_name'`` (5.7). The table prefix is stripped.
    Returns None for any other error.
    """

    if getattr(error, "errno", None) != errorcode.ER_DUP_ENTRY:
        return None
    msg = getattr(error, "msg", None) or str(error)
    m = _DUPLICATE_KEY_RE.search(msg)
    if not m:
        return None
    return m.group(1).rsplit(".", 1)[-1]


def placeholders(count: int) -> str:
    """``%s,%s,...`` for an ``IN (...)`` clause; values are still bound as parameters."""
    if count <= 0:
        raise ValueError("placeholders() needs at least one value")
    return ",".join(["%s"] * count)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches literally (MySQL escape char is ``\\``)."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
