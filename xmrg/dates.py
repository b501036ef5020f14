# region Imports
import os
import re
from datetime import datetime, timedelta
# endregion

_DIGITS = re.compile(r"\d+")

# region File-name Timestamps
def parse_xmrg_datetime(path) -> datetime:
    """Hour stamp from a legacy file name such as ``xmrg0506199516z.gz``.

    Reads the first run of digits in the base name as MMDDYYYYHH. Hour 24 is
    the end of the day and rolls over to 00 of the next one. Raises
    ValueError when fewer than ten digits follow or a field is out of range.
    """
    name = os.path.basename(os.fspath(path))
    m = _DIGITS.search(name)
    if m is None:
        raise ValueError(f"No date digits in file name: {name!r}")
    digits = m.group(0)
    if len(digits) < 10:
        raise ValueError(f"Expected MMDDYYYYHH in {name!r}, found {digits!r}")

    month, day, year, hour = int(digits[0:2]), int(digits[2:4]), int(digits[4:8]), int(digits[8:10])
    rollover = hour == 24
    try:
        stamp = datetime(year, month, day, 0 if rollover else hour)
    except ValueError as e:
        raise ValueError(f"Invalid date {digits[:10]!r} in {name!r}: {e}") from e
    return stamp + timedelta(days=1) if rollover else stamp
# endregion
