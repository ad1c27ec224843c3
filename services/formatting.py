"""
Display formatting helpers.
"""


def format_elapsed_time(seconds: int) -> str:
    """
    Format a number of seconds as a clock string.

    Returns "M:SS" below one hour and "H:MM:SS" from one hour up,
    e.g. 9 -> "0:09", 75 -> "1:15", 3725 -> "1:02:05".
    """
    if seconds < 0:
        raise ValueError(f"Elapsed time cannot be negative: {seconds}")

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
