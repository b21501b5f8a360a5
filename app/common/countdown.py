import dataclasses
import datetime

PLACEHOLDER = "--"
UNIT_LABELS = {"days": "Days", "hours": "Hours", "minutes": "Min", "seconds": "Sec"}


@dataclasses.dataclass(frozen=True)
class TimeLeft:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def display(self) -> dict[str, str]:
        """Each unit zero-padded to (at least) two digits, keyed by its label:

        > {"Days": "03", "Hours": "14", "Min": "07", "Sec": "59"}
        """
        return {label: f"{getattr(self, unit):02d}" for unit, label in UNIT_LABELS.items()}

    @classmethod
    def placeholder(cls) -> dict[str, str]:
        return {label: PLACEHOLDER for label in UNIT_LABELS.values()}


def time_left(target: datetime.datetime, now: datetime.datetime | None = None) -> TimeLeft:
    """Whole days, hours, minutes and seconds from `now` until `target`, floored; all zeros once `target` has passed.

    Both datetimes must be timezone-aware.
    """
    now = now or datetime.datetime.now(datetime.timezone.utc)
    remaining = int((target - now).total_seconds() // 1)
    if remaining <= 0:
        return TimeLeft()

    minutes, seconds = divmod(remaining, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    return TimeLeft(days=days, hours=hours, minutes=minutes, seconds=seconds)
