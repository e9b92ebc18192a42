# cmsgrid/application/grid/page_grid.py
from typing import Optional, Sequence
from flask import current_app
from cmsgrid.models.page import Page
from cmsgrid.grid import GridField, StatusEvaluator, VersionTagColumn
from cmsgrid.services.recursive_stages import RecursiveStages

PAGE_DISPLAY_FIELDS = {
    "ID": "id",
    "Title": "title",
    "Slug": "slug",
    "Created": "created_at",
    "LastEdited": "updated_at",
}


def build_page_grid(
    *,
    columns: Optional[Sequence[str]] = None,
    stages=None,
) -> GridField:
    """
    Page grid for one request.

    - columns: displayed column names; unknown names are dropped
    - stages: recursive stages service, RecursiveStages() by default
    """
    config = current_app.config

    if not columns:
        columns = config["GRID_DEFAULT_COLUMNS"]

    display_fields = {
        name: PAGE_DISPLAY_FIELDS[name]
        for name in columns
        if name in PAGE_DISPLAY_FIELDS
    }

    version_tag = VersionTagColumn(
        StatusEvaluator(stages or RecursiveStages()),
        config["GRID_VERSIONED_LABEL_FIELDS"],
    )

    records = Page.query.order_by(Page.created_at.asc(), Page.id.asc()).all()

    return GridField("pages", records, display_fields, [version_tag])
