"""Elapsed time to English, e.g. 3661 -> "1 hour 1 minute 1 second"."""

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def _unit(count: int, singular: str) -> str:
    return f"{count} {singular}" if count == 1 else f"{count} {singular}s"


def format_duration(seconds: int) -> str:
    """
    Describe an elapsed time in days, hours, minutes and seconds.

    Zero-valued units are omitted, except that seconds are always shown
    when no larger unit is. Day, hour and minute parts keep a trailing
    space, so 60 formats as "1 minute ".

    Args:
        seconds: Elapsed whole seconds (negative values count as 0)

    Returns:
        Phrase such as "2 days 1 hour 59 seconds"
    """
    seconds = max(int(seconds), 0)

    days, seconds = divmod(seconds, SECONDS_PER_DAY)
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)

    output = ""
    if days:
        output += _unit(days, "day") + " "
    if hours:
        output += _unit(hours, "hour") + " "
    if minutes:
        output += _unit(minutes, "minute") + " "
    if seconds or not output:
        output += _unit(seconds, "second")

    return output
