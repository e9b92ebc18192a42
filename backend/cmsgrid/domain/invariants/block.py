from .exceptions import InvariantViolation

MEDIA_BLOCK_TYPES = ("image", "video")

def assert_block(block):
    if block.type in MEDIA_BLOCK_TYPES and not block.media_url:
        raise InvariantViolation(
            f"{block.type} block must have media_url set."
        )
