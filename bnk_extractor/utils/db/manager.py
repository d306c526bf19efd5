"""Database manager for the bank extractor."""
import sqlite3
from pathlib import Path
from typing import Optional, Union
import logging

from ...chunks.hirc.types import ObjectType, enum_name
from ...parser.state import BankSession
from .schema import ALL_TABLES

logger = logging.getLogger(__name__)

class DatabaseManager:
    """Manages SQLite database operations for decoded banks."""

    def __init__(self, db_path: Union[str, Path]):
        """Initialize database manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self.conn: Optional[sqlite3.Connection] = None
        self.cursor: Optional[sqlite3.Cursor] = None

    def initialize(self) -> None:
        """Initialize database connection and create tables if needed."""
        try:
            self.conn = sqlite3.connect(self.db_path)
            self.cursor = self.conn.cursor()

            # Enable foreign key support
            self.cursor.execute("PRAGMA foreign_keys = ON;")

            # Create tables
            for create_table_sql in ALL_TABLES:
                self.cursor.execute(create_table_sql)

            self.conn.commit()
            logger.info(f"Database initialized at {self.db_path}")

        except sqlite3.Error as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def store_bank(self, filename: str, session: BankSession) -> int:
        """Store a decoded bank and its objects in one transaction.

        Args:
            filename: Name of the bank file
            session: Decoded bank

        Returns:
            Row id of the stored bank
        """
        if self.conn is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        try:
            header = session.header
            self.cursor.execute(
                """INSERT INTO banks (
                    filename, version, bank_id, data_offset, data_size, chunk_order
                ) VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    filename,
                    header.version if header else None,
                    header.bank_id if header else None,
                    session.data_offset,
                    session.data_size,
                    ','.join(session.chunk_order)
                )
            )
            bank_ref = self.cursor.lastrowid

            # Store errors if any
            if session.errors:
                self.cursor.executemany(
                    "INSERT INTO errors (bank_ref, error_message) VALUES (?, ?)",
                    [(bank_ref, error) for error in session.errors]
                )

            self._store_index_entries(bank_ref, session)
            self._store_objects(bank_ref, session)
            self._store_events(bank_ref, session)
            self._store_event_actions(bank_ref, session)

            # Commit transaction
            self.conn.commit()
            logger.info(f"Stored bank {filename} in database")
            return bank_ref

        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to store bank {filename}: {e}")
            raise

    def _store_index_entries(self, bank_ref: int, session: BankSession) -> None:
        """Store DIDX entries in on-disk order."""
        self.cursor.executemany(
            """INSERT INTO index_entries (
                bank_ref, entry_index, payload_id, payload_offset, payload_size
            ) VALUES (?, ?, ?, ?, ?)""",
            [
                (bank_ref, i, entry.id, entry.offset, entry.size)
                for i, entry in enumerate(session.entries)
            ]
        )

    def _store_objects(self, bank_ref: int, session: BankSession) -> None:
        """Store every hierarchy object header."""
        self.cursor.executemany(
            """INSERT INTO objects (
                bank_ref, object_index, object_id, type, kind, size
            ) VALUES (?, ?, ?, ?, ?, ?)""",
            [
                (bank_ref, i, obj.id, obj.type, enum_name(ObjectType, obj.type), obj.size)
                for i, obj in enumerate(session.objects)
            ]
        )

    def _store_events(self, bank_ref: int, session: BankSession) -> None:
        """Store the ordered action ids of each event."""
        rows = []
        for event_id, event in session.events.items():
            for position, action_id in enumerate(event.action_ids):
                rows.append((bank_ref, event_id, position, action_id))

        if rows:
            self.cursor.executemany(
                """INSERT INTO event_action_ids (
                    bank_ref, event_id, position, action_id
                ) VALUES (?, ?, ?, ?)""",
                rows
            )

    def _store_event_actions(self, bank_ref: int, session: BankSession) -> None:
        """Store event actions with their parameters."""
        for action_id, action in session.event_actions.items():
            self.cursor.execute(
                """INSERT INTO event_actions (
                    bank_ref, action_id, scope, action_type, game_object_id, parameter_count
                ) VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    bank_ref, action_id, action.scope, action.action_type,
                    action.game_object_id, action.parameter_count
                )
            )
            action_ref = self.cursor.lastrowid

            if action.parameter_count:
                self.cursor.executemany(
                    """INSERT INTO event_action_parameters (
                        event_action_ref, position, parameter_type, value
                    ) VALUES (?, ?, ?, ?)""",
                    [
                        (action_ref, position, param_type, value)
                        for position, (param_type, value) in enumerate(action.parameters)
                    ]
                )

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
            self.cursor = None
