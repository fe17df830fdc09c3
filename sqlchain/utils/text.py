"""General utility functions."""

from collections.abc import Sequence

__all__ = ("join_fragments",)


def join_fragments(fragments: Sequence[str], separator: str) -> str:
    """Join SQL fragments with a separator.

    Args:
        fragments: The fragments to join, in output order.
        separator: The text placed between consecutive fragments.

    Raises:
        ValueError: If there are no fragments to join.

    Returns:
        str: The joined text, without a leading or trailing separator.
    """
    if not fragments:
        msg = "Cannot join an empty sequence of fragments."
        raise ValueError(msg)
    return separator.join(fragments)
