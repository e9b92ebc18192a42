from .page import assert_page
from .section import assert_section
from .block import assert_block

# Publish-time checks per versioned table
PUBLISH_INVARIANTS = {
    "pages": assert_page,
    "sections": assert_section,
    "blocks": assert_block,
}


def assert_publishable(record):
    check = PUBLISH_INVARIANTS.get(record.entity_type)
    if check is not None:
        check(record)
