from cmsgrid.utils.order import orders_are_compact
from .block import assert_block
from .exceptions import InvariantViolation

def assert_section(section):
    blocks = section.blocks

    if not orders_are_compact(blocks):
        raise InvariantViolation(
            f"Block orders are not consecutive starting from 1: {[b.order for b in blocks]}"
        )

    for block in blocks:
        assert_block(block)
