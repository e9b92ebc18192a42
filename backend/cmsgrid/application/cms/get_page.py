from cmsgrid.extensions import db
from cmsgrid.models.page import Page
from cmsgrid.domain.invariants.exceptions import RecordNotFound


def get_page(page_id: str) -> Page:
    page = db.session.get(Page, page_id)
    if not page:
        raise RecordNotFound("Page not found")
    return page
