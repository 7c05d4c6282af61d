from datetime import datetime

FILENAME_STAMP_FORMAT = "%Y%m%d_%H%M%S"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

def now_local() -> datetime:
    """Current wall-clock time as a timezone-aware local datetime"""
    return datetime.now().astimezone()

def filename_stamp(moment: datetime) -> str:
    """Sortable stamp used in data/report filenames, e.g. 20261019_143005"""
    return moment.strftime(FILENAME_STAMP_FORMAT)

def display_time(moment: datetime) -> str:
    """Human readable time with the zone abbreviation when known"""
    text = moment.strftime(DISPLAY_FORMAT)
    zone = moment.strftime("%Z")
    return f"{text} {zone}" if zone else text
