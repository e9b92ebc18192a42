# cmsgrid/services/recursive_stages.py
from typing import Set, Tuple

from cmsgrid.models.versioned_mixin import is_versioned
from cmsgrid.utils.versioning import live_version, snapshot_record


class RecursiveStages:
    """
    Compares the draft stage of a record with its live stage.

    The draft stage is the row as it currently stands; the live stage is the
    snapshot written by the latest publish. Owned records are walked
    recursively, so a page is modified when any of its sections or blocks is.
    """

    def stages_differ(self, record) -> bool:
        live = live_version(record)
        if live is None:
            return True
        return live.snapshot != snapshot_record(record)

    def stages_differ_recursive(self, record) -> bool:
        return self._differ_recursive(record, set())

    def _differ_recursive(self, record, seen: Set[Tuple[str, str]]) -> bool:
        key = (record.entity_type, record.id)
        if key in seen:
            return False
        seen.add(key)

        if self.stages_differ(record):
            return True

        for owned in record.owned_records():
            if is_versioned(owned) and self._differ_recursive(owned, seen):
                return True

        return False
