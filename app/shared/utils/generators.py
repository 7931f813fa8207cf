"""Task id generation."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string, used as the primary key of a first-saved task."""
    return cuid_generator()
