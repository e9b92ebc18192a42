from typing import Optional


class ColumnSelection:
    """
    Single column name that is set at most once.

    Later calls to select() keep the first value, so a grid component
    decorates the same column for its whole lifetime.
    """

    def __init__(self, column: Optional[str] = None):
        self._column = column or None

    @property
    def column(self) -> Optional[str]:
        return self._column

    def is_set(self) -> bool:
        return self._column is not None

    def select(self, column: Optional[str]) -> Optional[str]:
        if self._column is None and column:
            self._column = column
        return self._column
