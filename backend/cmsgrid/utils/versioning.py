import copy
from typing import Any, Dict, Optional

from cmsgrid.extensions import db
from cmsgrid.models.record_version import RecordVersion, PUBLISHED


def snapshot_record(record) -> Dict[str, Any]:
    """
    Snapshot of a record's own stage.

    Owned records appear by id only; their content lives in their own
    snapshots. Adding or removing one therefore changes the owner's snapshot.
    """
    return {
        "fields": {
            name: copy.deepcopy(getattr(record, name))
            for name in record.__versioned_fields__
        },
        "owns": {
            relation: sorted(item.id for item in getattr(record, relation) or [])
            for relation in record.__owns__
        },
    }


def latest_version(record) -> Optional[RecordVersion]:
    if record.id is None:
        return None

    return (
        RecordVersion.query
        .filter_by(entity_type=record.entity_type, entity_id=record.id)
        .order_by(RecordVersion.version.desc())
        .first()
    )


def live_version(record) -> Optional[RecordVersion]:
    """Latest version if it is published, else None (never published or unpublished)."""
    last = latest_version(record)
    if last is None or last.status != PUBLISHED:
        return None
    return last


def next_version(record) -> int:
    last = latest_version(record)
    return (last.version + 1) if last else 1


def write_version(record, *, status: str, actor_id: Optional[str] = None) -> RecordVersion:
    version = RecordVersion()
    version.entity_type = record.entity_type
    version.entity_id = record.id
    version.version = next_version(record)
    version.status = status
    version.snapshot = snapshot_record(record) if status == PUBLISHED else None
    version.created_by = actor_id

    db.session.add(version)
    db.session.flush()  # later next_version() calls in this transaction see it
    return version
