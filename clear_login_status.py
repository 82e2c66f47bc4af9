import os
import sys
import sqlite3
import logging
import traceback
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from db_sqlite import DB_PATH, LOCAL_TZ, get_db_connection

logger = logging.getLogger(__name__)

ACTIVE_COUNT_SQL = "SELECT COUNT(*) as count FROM account_login WHERE logged_in > 0"
CLEAR_SQL = "UPDATE account_login SET logged_in = 0, login_time = NULL WHERE logged_in > 0"

class StoreNotFound(Exception):
    def __init__(self, db_path):
        super().__init__(f"Database not found at: {db_path}")
        self.db_path = db_path

class OperationFailure(Exception):
    pass

@dataclass
class ClearResult:
    db_path: str
    before: int
    after: int
    updated: int
    cleared_at: datetime

def _count_active(cur) -> int:
    cur.execute(ACTIVE_COUNT_SQL)
    return cur.fetchone()['count']

def clear_login_status(db_path: Optional[str] = None) -> ClearResult:
    """Mark every logged-in account as logged out and clear its login_time.

    Raises StoreNotFound when the database file does not exist (nothing is
    created or touched) and OperationFailure for any SQLite error.
    """
    db_path = str(db_path or DB_PATH)
    if not os.path.exists(db_path):
        raise StoreNotFound(db_path)

    logger.debug(f"Using database {db_path}")
    conn = None
    cur = None
    try:
        conn = get_db_connection(db_path)
        cur = conn.cursor()

        before = _count_active(cur)
        print(f"Before: {before} accounts marked as logged in")

        cur.execute(CLEAR_SQL)
        updated = cur.rowcount
        conn.commit()

        after = _count_active(cur)
        print(f"After: {after} accounts marked as logged in")
        print(f"Updated {updated} records")
    except sqlite3.Error as e:
        raise OperationFailure(str(e)) from e
    finally:
        if cur is not None:
            cur.close()
        if conn is not None:
            conn.close()

    return ClearResult(
        db_path=db_path,
        before=before,
        after=after,
        updated=updated,
        cleared_at=datetime.now(LOCAL_TZ),
    )

def main() -> int:
    logging.basicConfig(level=logging.INFO)
    print("Clearing all login statuses...")
    try:
        result = clear_login_status(DB_PATH)
    except StoreNotFound as e:
        print(e)
        return 1
    except Exception as e:
        logger.error(f"Error clearing login statuses: {e}")
        logger.error(traceback.format_exc())
        return 1

    logger.debug(f"Reset finished at {result.cleared_at.isoformat()}")
    print("Login statuses cleared successfully!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
