# cmsgrid/models/versioned_mixin.py
from typing import Iterator, Tuple


class VersionedMixin:
    """
    Marks a model as carrying a draft and a live stage.

    - __versioned_fields__: columns that make up the record's own snapshot
    - __owns__: relationships whose records are published with this one
    """

    __versioned_fields__: Tuple[str, ...] = ()
    __owns__: Tuple[str, ...] = ()

    @property
    def entity_type(self) -> str:
        return self.__tablename__

    def owned_records(self) -> Iterator["VersionedMixin"]:
        for relation in self.__owns__:
            for item in getattr(self, relation) or []:
                yield item


def is_versioned(record) -> bool:
    return isinstance(record, VersionedMixin)
