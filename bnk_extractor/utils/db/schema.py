"""Database schema definitions for the bank extractor."""

# Core tables
CREATE_BANKS_TABLE = """
CREATE TABLE IF NOT EXISTS banks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    filename TEXT NOT NULL,
    version INTEGER,
    bank_id INTEGER,
    data_offset INTEGER,
    data_size INTEGER NOT NULL,
    chunk_order TEXT NOT NULL,
    processed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

CREATE_ERRORS_TABLE = """
CREATE TABLE IF NOT EXISTS errors (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bank_ref INTEGER NOT NULL,
    error_message TEXT NOT NULL,
    FOREIGN KEY (bank_ref) REFERENCES banks(id)
);
"""

# Payload index
CREATE_INDEX_ENTRIES_TABLE = """
CREATE TABLE IF NOT EXISTS index_entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bank_ref INTEGER NOT NULL,
    entry_index INTEGER NOT NULL,
    payload_id INTEGER NOT NULL,
    payload_offset INTEGER NOT NULL,
    payload_size INTEGER NOT NULL,
    FOREIGN KEY (bank_ref) REFERENCES banks(id)
);
"""

# Hierarchy
CREATE_OBJECTS_TABLE = """
CREATE TABLE IF NOT EXISTS objects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bank_ref INTEGER NOT NULL,
    object_index INTEGER NOT NULL,
    object_id INTEGER NOT NULL,
    type INTEGER NOT NULL,
    kind TEXT,
    size INTEGER NOT NULL,
    FOREIGN KEY (bank_ref) REFERENCES banks(id)
);
"""

CREATE_EVENT_ACTION_IDS_TABLE = """
CREATE TABLE IF NOT EXISTS event_action_ids (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bank_ref INTEGER NOT NULL,
    event_id INTEGER NOT NULL,
    position INTEGER NOT NULL,
    action_id INTEGER NOT NULL,
    FOREIGN KEY (bank_ref) REFERENCES banks(id)
);
"""

CREATE_EVENT_ACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS event_actions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bank_ref INTEGER NOT NULL,
    action_id INTEGER NOT NULL,
    scope INTEGER NOT NULL,
    action_type INTEGER NOT NULL,
    game_object_id INTEGER NOT NULL,
    parameter_count INTEGER NOT NULL,
    FOREIGN KEY (bank_ref) REFERENCES banks(id)
);
"""

CREATE_EVENT_ACTION_PARAMETERS_TABLE = """
CREATE TABLE IF NOT EXISTS event_action_parameters (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    event_action_ref INTEGER NOT NULL,
    position INTEGER NOT NULL,
    parameter_type INTEGER NOT NULL,
    value INTEGER NOT NULL,
    FOREIGN KEY (event_action_ref) REFERENCES event_actions(id)
);
"""

# All table creation statements in order of dependency
ALL_TABLES = [
    CREATE_BANKS_TABLE,
    CREATE_ERRORS_TABLE,
    CREATE_INDEX_ENTRIES_TABLE,
    CREATE_OBJECTS_TABLE,
    CREATE_EVENT_ACTION_IDS_TABLE,
    CREATE_EVENT_ACTIONS_TABLE,
    CREATE_EVENT_ACTION_PARAMETERS_TABLE,
]
