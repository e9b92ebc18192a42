from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from flask import current_app
from cmsgrid.models.page import Page
from cmsgrid.domain.invariants import assert_page
from cmsgrid.domain.invariants.exceptions import InvariantViolation
from cmsgrid.utils.transaction import transactional
from .get_page import get_page


ALLOWED_UPDATE_FIELDS = ("title", "slug", "seo")


def update_page(
    *,
    page_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page's draft stage.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    - Invariants always revalidated
    """

    page = get_page(page_id)

    changed_fields: list[str] = []

    try:
        with transactional():
            for field in ALLOWED_UPDATE_FIELDS:
                if field in data and getattr(page, field) != data[field]:
                    setattr(page, field, data[field])
                    changed_fields.append(field)

            if not changed_fields:
                raise InvariantViolation("No valid fields provided for update")

            assert_page(page)

    except IntegrityError as exc:
        raise InvariantViolation("A page with this slug already exists") from exc

    current_app.logger.debug("Updated page %s fields=%s", page.id, changed_fields)
    return page
