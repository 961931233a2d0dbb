# SQL schema for Senderos database

SCHEMA_VERSION = 1

SCHEMA_SQL = """
-- Spaced-repetition state, one row per card identity
CREATE TABLE IF NOT EXISTS schedules (
    card_id TEXT PRIMARY KEY,
    ef REAL NOT NULL,
    reps INTEGER NOT NULL,
    interval_ms INTEGER NOT NULL,
    due_ms INTEGER NOT NULL,
    lapses INTEGER NOT NULL DEFAULT 0,
    is_leech INTEGER NOT NULL DEFAULT 0
);
"""

INDEXES_SQL = """
CREATE INDEX IF NOT EXISTS idx_schedules_due ON schedules (due_ms);
"""
