from flask import request, jsonify
from cmsgrid.application.grid.page_grid import build_page_grid
from cmsgrid.normalizers.grid import normalize_grid
from . import v1_bp


@v1_bp.route("/grid/pages", methods=["GET"])
def page_grid():
    raw = request.args.get("columns", "")
    columns = [name.strip() for name in raw.split(",") if name.strip()]

    grid = build_page_grid(columns=columns)

    return jsonify(normalize_grid(grid)), 200
