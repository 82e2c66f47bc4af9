import sqlite3
import traceback
from datetime import datetime
import pytz

DB_PATH = "engine/db.sqlite"

# Timezone used for login timestamps written by this project
LOCAL_TZ = pytz.timezone("America/Caracas")

ACCOUNT_LOGIN_SCHEMA = """
CREATE TABLE IF NOT EXISTS account_login (
    account_id TEXT PRIMARY KEY,
    logged_in INTEGER NOT NULL DEFAULT 0,
    login_time TIMESTAMP
);
"""

def get_db_connection(db_path=None):
    conn = sqlite3.connect(db_path or DB_PATH)
    conn.row_factory = sqlite3.Row  # This makes rows behave like dictionaries
    return conn

def init_db(db_path=None):
    try:
        conn = get_db_connection(db_path)
        cur = conn.cursor()
        cur.execute(ACCOUNT_LOGIN_SCHEMA)
        conn.commit()
        cur.close()
        conn.close()
        print("SQLite database initialized successfully")
    except Exception as e:
        print("[ERROR] Error initializing SQLite DB:", e)
        traceback.print_exc()
        raise

# Add some demo data
def add_demo_data(db_path=None, logged_in=3, logged_out=2):
    """Seed demo accounts, half of them logged in, if the table is empty.

    Returns the number of rows inserted.
    """
    conn = get_db_connection(db_path)
    cur = conn.cursor()
    inserted = 0
    try:
        # Check if demo data already exists
        cur.execute("SELECT COUNT(*) as count FROM account_login")
        count = cur.fetchone()['count']

        if count == 0:
            now = datetime.now(LOCAL_TZ).isoformat()
            rows = [(f"DEMO_{i:03d}", 1, now) for i in range(1, logged_in + 1)]
            rows += [(f"DEMO_{i:03d}", 0, None) for i in range(logged_in + 1, logged_in + logged_out + 1)]
            cur.executemany("""
                INSERT INTO account_login (account_id, logged_in, login_time)
                VALUES (?, ?, ?)
            """, rows)
            conn.commit()
            inserted = len(rows)
            print(f"Demo data added successfully ({inserted} accounts)")
    finally:
        cur.close()
        conn.close()
    return inserted

if __name__ == "__main__":
    init_db()
    add_demo_data()
