# backend/tripgenius/db/sqlite_store.py

import json
import sqlite3
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from tripgenius.core.logger import get_logger
from tripgenius.db.base import (
    TRIP_MUTABLE_FIELDS,
    DuplicateEmailError,
    TripStore,
    normalize_email,
)
from tripgenius.utils.time_utils import utc_now_iso

log = get_logger("sqlite")

# Retry configuration
MAX_RETRIES = 5
RETRY_DELAY = 0.1  # 100ms


class SQLiteStore(TripStore):
    def __init__(self, db_path: str):
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=30.0
        )
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.execute("PRAGMA synchronous=NORMAL")
        self.conn.execute("PRAGMA busy_timeout=30000")
        # one connection shared by the threadpool
        self._lock = threading.RLock()
        self._init_tables()

    def _execute_with_retry(self, operation, *args, **kwargs):
        """Run a write, retrying while another process holds the database lock."""
        for attempt in range(MAX_RETRIES):
            try:
                with self._lock:
                    return operation(*args, **kwargs)
            except sqlite3.OperationalError as e:
                if "locked" in str(e).lower() and attempt < MAX_RETRIES - 1:
                    log.warning(f"Database locked, retry {attempt + 1}/{MAX_RETRIES}")
                    time.sleep(RETRY_DELAY * (attempt + 1))
                    continue
                raise

    def _fetchone(self, sql: str, params: tuple) -> Optional[sqlite3.Row]:
        with self._lock:
            cur = self.conn.cursor()
            cur.execute(sql, params)
            return cur.fetchone()

    # ----------------------------------------------------------------------
    # CREATE TABLES
    # ----------------------------------------------------------------------
    def _init_tables(self):
        cur = self.conn.cursor()

        cur.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            email TEXT UNIQUE NOT NULL,
            name TEXT NOT NULL,
            password_hash TEXT NOT NULL,
            email_verified INTEGER DEFAULT 0,
            verification_token TEXT,
            created_at TEXT NOT NULL
        );
        """)

        cur.execute("""
        CREATE TABLE IF NOT EXISTS trips (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            name TEXT,
            destination TEXT,
            start_date TEXT,
            end_date TEXT,
            budget REAL DEFAULT 0,
            members INTEGER DEFAULT 1,
            mood TEXT,
            itinerary_json TEXT,
            favorite INTEGER DEFAULT 0,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
        );
        """)

        cur.execute("CREATE INDEX IF NOT EXISTS idx_trips_user ON trips(user_id);")
        cur.execute("CREATE INDEX IF NOT EXISTS idx_users_verify ON users(verification_token);")

        self.conn.commit()

    # ----------------------------------------------------------------------
    # ROW MAPPING
    # ----------------------------------------------------------------------
    @staticmethod
    def _user_row(row: Optional[sqlite3.Row]) -> Optional[Dict[str, Any]]:
        if not row:
            return None
        user = dict(row)
        user["email_verified"] = bool(user["email_verified"])
        return user

    @staticmethod
    def _trip_row(row: Optional[sqlite3.Row]) -> Optional[Dict[str, Any]]:
        if not row:
            return None
        trip = dict(row)
        raw = trip.pop("itinerary_json")
        trip["itinerary"] = json.loads(raw) if raw else None
        trip["favorite"] = bool(trip["favorite"])
        return trip

    # ----------------------------------------------------------------------
    # USER CRUD
    # ----------------------------------------------------------------------
    def create_user(
        self, email: str, name: str, password_hash: str,
        email_verified: bool = False,
        verification_token: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        user_id = user_id or f"user_{uuid4().hex[:12]}"
        email = normalize_email(email)

        def _create_user():
            cur = self.conn.cursor()
            try:
                cur.execute("""
                INSERT INTO users (id, email, name, password_hash, email_verified,
                                   verification_token, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """, (
                    user_id, email, name, password_hash,
                    int(email_verified), verification_token, utc_now_iso(),
                ))
            except sqlite3.IntegrityError as e:
                self.conn.rollback()
                raise DuplicateEmailError(email) from e
            self.conn.commit()

        self._execute_with_retry(_create_user)
        return self.get_user_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        row = self._fetchone("SELECT * FROM users WHERE email = ?", (normalize_email(email),))
        return self._user_row(row)

    def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        row = self._fetchone("SELECT * FROM users WHERE id = ?", (user_id,))
        return self._user_row(row)

    def get_user_by_verification_token(self, token: str) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        row = self._fetchone("SELECT * FROM users WHERE verification_token = ?", (token,))
        return self._user_row(row)

    def mark_email_verified(self, user_id: str) -> None:
        def _verify():
            cur = self.conn.cursor()
            cur.execute("""
            UPDATE users SET email_verified = 1, verification_token = NULL
            WHERE id = ?
            """, (user_id,))
            self.conn.commit()

        self._execute_with_retry(_verify)

    # ----------------------------------------------------------------------
    # TRIP CRUD
    # ----------------------------------------------------------------------
    def create_trip(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        trip_id = uuid4().hex
        now = utc_now_iso()

        def _create_trip():
            cur = self.conn.cursor()
            cur.execute("""
            INSERT INTO trips (id, user_id, name, destination, start_date, end_date,
                               budget, members, mood, itinerary_json, favorite,
                               created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                trip_id, user_id,
                data.get("name"), data.get("destination"),
                data.get("start_date"), data.get("end_date"),
                data.get("budget", 0), data.get("members", 1), data.get("mood"),
                json.dumps(data["itinerary"]) if data.get("itinerary") else None,
                int(bool(data.get("favorite", False))),
                now, now,
            ))
            self.conn.commit()

        self._execute_with_retry(_create_trip)
        return self.get_trip(trip_id)

    def get_trip(self, trip_id: str) -> Optional[Dict[str, Any]]:
        row = self._fetchone("SELECT * FROM trips WHERE id = ?", (trip_id,))
        return self._trip_row(row)

    def list_trips(self, user_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            cur = self.conn.cursor()
            cur.execute("""
            SELECT * FROM trips
            WHERE user_id = ?
            ORDER BY created_at DESC, rowid DESC
            """, (user_id,))
            rows = cur.fetchall()
        return [self._trip_row(r) for r in rows]

    def update_trip(self, trip_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        columns = []
        values = []
        for field, value in changes.items():
            if field not in TRIP_MUTABLE_FIELDS:
                continue
            if field == "itinerary":
                columns.append("itinerary_json = ?")
                values.append(json.dumps(value) if value else None)
            elif field == "favorite":
                columns.append("favorite = ?")
                values.append(int(bool(value)))
            else:
                columns.append(f"{field} = ?")
                values.append(value)
        columns.append("updated_at = ?")
        values.append(utc_now_iso())

        def _update_trip():
            cur = self.conn.cursor()
            cur.execute(
                f"UPDATE trips SET {', '.join(columns)} WHERE id = ?",
                (*values, trip_id),
            )
            self.conn.commit()
            return cur.rowcount

        if not self._execute_with_retry(_update_trip):
            return None
        return self.get_trip(trip_id)

    def delete_trip(self, trip_id: str) -> bool:
        def _delete_trip():
            cur = self.conn.cursor()
            cur.execute("DELETE FROM trips WHERE id = ?", (trip_id,))
            self.conn.commit()
            return cur.rowcount

        return bool(self._execute_with_retry(_delete_trip))
