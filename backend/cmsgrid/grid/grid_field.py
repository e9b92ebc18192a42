# cmsgrid/grid/grid_field.py
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from markupsafe import Markup, escape


class GridField:
    """
    Table of records with named columns.

    display_fields maps column names to record attributes. Components may
    add content to the columns they handle; a component's column list is
    computed once per grid.
    """

    def __init__(
        self,
        name: str,
        records: Iterable[Any],
        display_fields: Mapping[str, str],
        components: Sequence[Any] = (),
    ):
        self.name = name
        self.records = records
        self.display_fields = dict(display_fields)
        self.components = list(components)
        self._columns: List[str] | None = None

    def columns(self) -> List[str]:
        if self._columns is None:
            columns = list(self.display_fields)
            for component in self.components:
                component.augment_columns(self, columns)
            self._columns = columns
        return list(self._columns)

    def field_value(self, record, column_name: str):
        attribute = self.display_fields.get(column_name)
        if attribute is None:
            return ""
        value = getattr(record, attribute, None)
        if value is None:
            return ""
        if hasattr(value, "isoformat"):
            return value.isoformat()
        return value

    def cell_content(self, record, column_name: str) -> Markup:
        content = escape(self.field_value(record, column_name))
        for component in self.components:
            if column_name in component.columns_handled(self):
                content += component.column_content(self, record, column_name)
        return content

    def render_rows(self) -> List[Dict[str, Any]]:
        columns = self.columns()
        return [
            {
                "id": record.id,
                "cells": {
                    name: str(self.cell_content(record, name))
                    for name in columns
                },
            }
            for record in self.records
        ]
