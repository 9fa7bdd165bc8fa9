"""
SQLite schema for users, resources, bookings and the audit log.

Triggers keep the booking invariants true even for writers that bypass the
service layer.
"""

OVERLAP_ERROR = "booking overlaps an existing booking"
STATUS_ERROR = "invalid booking status transition"
AUDIT_ERROR = "audit events are append-only"

SCHEMA = f"""
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL DEFAULT 'User'
);

CREATE TABLE IF NOT EXISTS resources (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    is_active INTEGER NOT NULL DEFAULT 1
);

CREATE TABLE IF NOT EXISTS bookings (
    id TEXT PRIMARY KEY,
    resource_id TEXT NOT NULL REFERENCES resources(id),
    user_id TEXT NOT NULL,
    starts_at TEXT NOT NULL,
    ends_at TEXT NOT NULL,
    starts_at_us INTEGER NOT NULL,
    ends_at_us INTEGER NOT NULL,
    status TEXT NOT NULL DEFAULT 'Created',
    created_at TEXT NOT NULL,
    CHECK (ends_at_us > starts_at_us),
    CHECK (status IN ('Created', 'Cancelled'))
);

CREATE INDEX IF NOT EXISTS ix_bookings_resource_status
    ON bookings (resource_id, status);
CREATE INDEX IF NOT EXISTS ix_bookings_user_start
    ON bookings (user_id, starts_at_us);

CREATE TABLE IF NOT EXISTS audit_events (
    id TEXT PRIMARY KEY,
    actor_email TEXT NOT NULL,
    action TEXT NOT NULL,
    entity_type TEXT NOT NULL,
    entity_id TEXT NOT NULL,
    at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS ix_audit_events_entity
    ON audit_events (entity_type, entity_id);

CREATE TRIGGER IF NOT EXISTS bookings_no_overlap
BEFORE INSERT ON bookings
WHEN NEW.status = 'Created' AND EXISTS (
    SELECT 1 FROM bookings b
    WHERE b.resource_id = NEW.resource_id
      AND b.status = 'Created'
      AND NEW.starts_at_us < b.ends_at_us
      AND NEW.ends_at_us > b.starts_at_us
)
BEGIN
    SELECT RAISE(ABORT, '{OVERLAP_ERROR}');
END;

CREATE TRIGGER IF NOT EXISTS bookings_status_transition
BEFORE UPDATE OF status ON bookings
WHEN NOT (OLD.status = 'Created' AND NEW.status = 'Cancelled')
BEGIN
    SELECT RAISE(ABORT, '{STATUS_ERROR}');
END;

CREATE TRIGGER IF NOT EXISTS bookings_fixed_fields
BEFORE UPDATE OF id, resource_id, user_id, starts_at, ends_at,
                 starts_at_us, ends_at_us, created_at ON bookings
BEGIN
    SELECT RAISE(ABORT, 'booking fields are immutable');
END;

CREATE TRIGGER IF NOT EXISTS bookings_no_delete
BEFORE DELETE ON bookings
BEGIN
    SELECT RAISE(ABORT, 'bookings are never deleted');
END;

CREATE TRIGGER IF NOT EXISTS audit_events_no_update
BEFORE UPDATE ON audit_events
BEGIN
    SELECT RAISE(ABORT, '{AUDIT_ERROR}');
END;

CREATE TRIGGER IF NOT EXISTS audit_events_no_delete
BEFORE DELETE ON audit_events
BEGIN
    SELECT RAISE(ABORT, '{AUDIT_ERROR}');
END;
"""
