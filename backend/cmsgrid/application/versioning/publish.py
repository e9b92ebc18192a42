# cmsgrid/application/versioning/publish.py
from typing import Dict, List, Optional
from flask import current_app
from cmsgrid.extensions import db
from cmsgrid.models.record_version import PUBLISHED, UNPUBLISHED
from cmsgrid.models.versioned_mixin import is_versioned
from cmsgrid.utils.transaction import transactional
from cmsgrid.utils.versioning import live_version, write_version
from cmsgrid.domain.invariants import assert_publishable
from cmsgrid.domain.invariants.exceptions import InvariantViolation


def _walk(record) -> List:
    """Record followed by every versioned record it owns, depth first."""
    seen = set()
    ordered = []

    def visit(item):
        key = (item.entity_type, item.id)
        if key in seen:
            return
        seen.add(key)
        ordered.append(item)
        for owned in item.owned_records():
            if is_versioned(owned):
                visit(owned)

    visit(record)
    return ordered


def publish_record(
    record,
    *,
    actor_id: Optional[str] = None,
) -> Dict[str, int | str]:
    """
    Copies the draft stage of a record and everything it owns to live.

    Responsibilities:
    - transactional boundary
    - publish invariants on every record in the tree
    - one published RecordVersion per record
    """
    if not is_versioned(record):
        raise InvariantViolation(f"{type(record).__name__} records are not versioned")

    with transactional():
        db.session.flush()  # assigns ids to records not yet written

        records = _walk(record)
        for item in records:
            assert_publishable(item)

        versions = [
            write_version(item, status=PUBLISHED, actor_id=actor_id)
            for item in records
        ]

    current_app.logger.info(
        "Published %s %s as version %s (%d records)",
        record.entity_type, record.id, versions[0].version, len(versions),
    )

    return {
        "entity_id": record.id,
        "version": versions[0].version,
    }


def unpublish_record(
    record,
    *,
    actor_id: Optional[str] = None,
) -> Dict[str, int | str]:
    """
    Removes the live stage of a record and everything it owns.
    The draft stage is left untouched.
    """
    if not is_versioned(record):
        raise InvariantViolation(f"{type(record).__name__} records are not versioned")

    if live_version(record) is None:
        raise InvariantViolation(
            f"{record.entity_type} {record.id} is not published"
        )

    with transactional():
        versions = [
            write_version(item, status=UNPUBLISHED, actor_id=actor_id)
            for item in _walk(record)
            if live_version(item) is not None
        ]

    current_app.logger.info(
        "Unpublished %s %s (%d records)",
        record.entity_type, record.id, len(versions),
    )

    return {
        "entity_id": record.id,
        "version": versions[0].version,
    }
