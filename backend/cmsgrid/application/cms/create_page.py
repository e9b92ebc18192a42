from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from cmsgrid.extensions import db
from cmsgrid.models.page import Page
from cmsgrid.domain.invariants import assert_page
from cmsgrid.domain.invariants.exceptions import InvariantViolation
from cmsgrid.utils.transaction import transactional


def create_page(
    *,
    data: Dict[str, Any],
) -> Page:
    """
    Create a new CMS page. The page exists on the draft stage only
    until it is published.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug
    - Invariant violations
    """

    title: str | None = data.get("title")
    slug: str | None = data.get("slug")

    if not title or not slug:
        raise InvariantViolation("Both title and slug are required")

    page = Page()
    page.title = title
    page.slug = slug
    page.seo = data.get("seo") or {}
    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            assert_page(page)

        return page

    except IntegrityError as exc:
        # Raised by the unique constraint on slug
        raise InvariantViolation("A page with this slug already exists") from exc
