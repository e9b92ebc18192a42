# cmsgrid/api/v1/pages.py
from flask import request, jsonify
from cmsgrid.application.cms.create_page import create_page as create_page_service
from cmsgrid.application.cms.update_page import update_page as update_page_service
from cmsgrid.application.cms.get_page import get_page
from cmsgrid.application.versioning import publish_record, unpublish_record
from cmsgrid.normalizers.page import normalize_page
from cmsgrid.services.recursive_stages import RecursiveStages
from . import v1_bp


@v1_bp.route("/pages", methods=["POST"])
def create_page():
    data = request.get_json(silent=True) or {}
    page = create_page_service(data=data)

    return jsonify({
        "id": page.id,
        "message": "Page created successfully"
    }), 201


@v1_bp.route("/pages/<page_id>", methods=["GET"])
def get_page_by_id(page_id):
    page = get_page(page_id)
    return jsonify(normalize_page(page, stages=RecursiveStages())), 200


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
def update_page(page_id):
    data = request.get_json(silent=True) or {}
    update_page_service(page_id=page_id, data=data)

    return jsonify({"message": "Page updated successfully"}), 200


@v1_bp.route("/pages/<page_id>/publish", methods=["POST"])
def publish_page(page_id):
    page = get_page(page_id)
    result = publish_record(page)

    return jsonify({
        "message": "Page published successfully",
        "page_id": result["entity_id"],
        "version": result["version"],
    }), 200


@v1_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
def unpublish_page(page_id):
    page = get_page(page_id)
    result = unpublish_record(page)

    return jsonify({
        "message": "Page unpublished successfully",
        "page_id": result["entity_id"],
        "version": result["version"],
    }), 200
