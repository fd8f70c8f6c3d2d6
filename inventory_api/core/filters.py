# inventory_api/core/filters.py

from datetime import date, datetime


def date_range_filters(column, start_date: date | None, end_date: date | None):
    """Inclusive calendar-day bounds on a timestamp column."""
    filters = []

    if start_date is not None:
        filters.append(column >= datetime.combine(start_date, datetime.min.time()))

    if end_date is not None:
        filters.append(column <= datetime.combine(end_date, datetime.max.time()))

    return filters


def search_filter(term: str | None, *columns):
    if not term:
        return None

    like = f"%{term}%"
    clause = columns[0].ilike(like)
    for column in columns[1:]:
        clause = clause | column.ilike(like)
    return clause
