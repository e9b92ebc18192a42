# cmsgrid/grid/version_tag.py
import logging
from typing import Dict, List, Optional, Sequence

from markupsafe import Markup

from .badges import render_badges
from .column_selection import ColumnSelection
from .status import StatusEvaluator, StatusFlags

logger = logging.getLogger(__name__)

DEFAULT_VERSIONED_LABEL_FIELDS = ("Name", "Title")


class VersionTagColumn:
    """
    Grid column component that appends version state badges to one column.

    Several label fields may be preferred, but badges only appear in the
    first one the grid displays. If none is displayed, the first column is
    used instead.
    """

    def __init__(
        self,
        evaluator: StatusEvaluator,
        versioned_label_fields: Optional[Sequence[str]] = None,
        *,
        column: Optional[str] = None,
    ):
        self.evaluator = evaluator
        self.versioned_label_fields = versioned_label_fields
        self._selection = ColumnSelection(column)

    @property
    def versioned_label_fields(self) -> List[str]:
        return list(self._versioned_label_fields)

    @versioned_label_fields.setter
    def versioned_label_fields(self, fields: Optional[Sequence[str]]) -> None:
        if fields is None:
            fields = DEFAULT_VERSIONED_LABEL_FIELDS
        elif isinstance(fields, str):
            fields = (fields,)
        self._versioned_label_fields = tuple(fields)

    @property
    def column(self) -> Optional[str]:
        """Column decorated with version state, or None."""
        return self._selection.column

    def augment_columns(self, grid, columns: Sequence[str]) -> None:
        """
        Pick the decorated column from the grid's displayed columns.
        Does nothing once a column has been picked.
        """
        if self._selection.is_set():
            return

        columns = list(columns or [])
        matched = [name for name in columns if name in self._versioned_label_fields]

        if matched:
            self._selection.select(matched[0])
        elif columns:
            # Use first column if none of the preferred ones is displayed
            self._selection.select(columns[0])

        if self.column:
            logger.debug(
                "Version badges for grid %s go in column %s",
                getattr(grid, "name", grid), self.column,
            )

    def columns_handled(self, grid) -> List[str]:
        return [self.column] if self.column else []

    def status_flags(self, record) -> StatusFlags:
        return self.evaluator.status_flags(record)

    def column_content(self, grid, record, column_name: str) -> Markup:
        """HTML appended to the cell; empty when the record has no flags."""
        return render_badges(self.status_flags(record))

    def column_attributes(self, grid, record, column_name: str) -> Dict[str, str]:
        return {}

    def column_metadata(self, grid, column_name: str) -> Dict[str, str]:
        return {}
