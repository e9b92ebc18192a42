from .badges import render_badges
from .column_selection import ColumnSelection
from .grid_field import GridField
from .status import ModifiedFlag, StagesDiffer, StatusEvaluator, StatusFlag
from .version_tag import VersionTagColumn
