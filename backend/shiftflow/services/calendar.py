from datetime import date, datetime, timedelta
from typing import List, Union

DayLike = Union[date, datetime, str]


def to_day(value: DayLike) -> date:
    """
    Привести значение к календарному дню

    Время суток отбрасывается: строка обрезается до YYYY-MM-DD,
    у datetime берется только дата. Часовые пояса не пересчитываются.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise ValueError(f"Некорректная дата: {value!r}")
    raise TypeError(f"Ожидалась дата, получено {type(value).__name__}")


def expand_days(date_from: DayLike, date_to: DayLike) -> List[date]:
    """
    Все календарные дни периода по возрастанию, обе границы включительно

    Если date_from позже date_to, возвращается пустой список.
    """
    current = to_day(date_from)
    end = to_day(date_to)

    days = []
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days
