# cmsgrid/grid/status.py
from typing import Callable, Dict, Iterable, Optional, Protocol, TypedDict

from cmsgrid.models.versioned_mixin import is_versioned
from cmsgrid.utils.i18n import translate


class StatusFlag(TypedDict, total=False):
    """
    Badge shown next to a record.

    text is always present; title is only set when the flag has one.
    """
    text: str
    title: str


StatusFlags = Dict[str, StatusFlag]
FlagProvider = Callable[[object], StatusFlags]


class StagesDiffer(Protocol):
    def stages_differ_recursive(self, record) -> bool:
        ...


class ModifiedFlag:
    """Flags records whose draft stage differs from their live stage."""

    name = "modified"

    def __init__(self, stages: StagesDiffer):
        self.stages = stages

    def __call__(self, record) -> StatusFlags:
        if not self.stages.stages_differ_recursive(record):
            return {}

        return {
            self.name: {
                "text": translate("VersionTag.MODIFIEDONDRAFTSHORT", "Modified"),
                "title": translate("VersionTag.MODIFIEDONDRAFTHELP", "Item has unpublished changes"),
            }
        }


class StatusEvaluator:
    """
    Computes the status flags of a record.

    Only versioned records carry stages, so every other record gets no
    flags. Flags are recomputed on each call.
    """

    def __init__(
        self,
        stages: StagesDiffer,
        providers: Optional[Iterable[FlagProvider]] = None,
    ):
        if providers is None:
            providers = [ModifiedFlag(stages)]
        self.providers = list(providers)

    def status_flags(self, record) -> StatusFlags:
        if not is_versioned(record):
            return {}

        flags: StatusFlags = {}
        for provider in self.providers:
            flags.update(provider(record))
        return flags
