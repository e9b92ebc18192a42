from .page import Page
from .section import Section
from .block import Block
from .tag import Tag
from .record_version import RecordVersion
from .versioned_mixin import VersionedMixin, is_versioned
