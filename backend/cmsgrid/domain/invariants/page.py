from cmsgrid.utils.order import orders_are_compact
from .section import assert_section
from .exceptions import InvariantViolation

def assert_page(page):
    if not page.title or not page.slug:
        raise InvariantViolation("Page requires both title and slug.")

    sections = page.sections

    if not orders_are_compact(sections):
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 1: {[s.order for s in sections]}"
        )

    for section in sections:
        assert_section(section)
