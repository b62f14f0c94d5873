"""
Human-readable formatting of byte counts.
"""
UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
SCALE = 1024


def format_size(size: int) -> str:
    """Format a byte count with the largest unit that keeps the value >= 2.

    Counts below 2KB are shown as raw bytes, larger ones with three
    decimals, e.g. ``1024B``, ``2.000KB``, ``3.000GB``.

    Args:
        size: Number of bytes

    Returns:
        Formatted size string
    """
    if size < 2 * SCALE:
        return f"{size}{UNITS[0]}"

    for ndx in range(1, len(UNITS)):
        if size < 2 * SCALE ** (ndx + 1):
            return f"{size / SCALE ** ndx:.3f}{UNITS[ndx]}"

    ndx = len(UNITS) - 1
    return f"{size / SCALE ** ndx:.3f}{UNITS[ndx]}"
