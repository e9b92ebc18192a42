from typing import Any, Dict


def normalize_grid(grid) -> Dict[str, Any]:
    """
    Grid as API JSON. Cell values are HTML fragments.
    """
    return {
        "name": grid.name,
        "columns": grid.columns(),
        "rows": grid.render_rows(),
    }
