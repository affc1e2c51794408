from typing import Callable, Dict, List, Optional

from poper.domain.models.movie import MovieRecord
from poper.domain.models.suggestion import YearBucket

CLASSIC_CUTOFF = 1980


def _exact(target: int) -> Callable[[int], bool]:
    return lambda year: year == target


def _decade(start: int) -> Callable[[int], bool]:
    return lambda year: start <= year <= start + 9


_PREDICATES: Dict[str, Callable[[int], bool]] = {
    YearBucket.Y2025.value: _exact(2025),
    YearBucket.Y2024.value: _exact(2024),
    YearBucket.Y2023.value: _exact(2023),
    YearBucket.Y2022.value: _exact(2022),
    YearBucket.Y2021.value: _exact(2021),
    YearBucket.Y2020.value: _exact(2020),
    YearBucket.DECADE_2010S.value: _decade(2010),
    YearBucket.DECADE_2000S.value: _decade(2000),
    YearBucket.DECADE_1990S.value: _decade(1990),
    YearBucket.DECADE_1980S.value: _decade(1980),
    YearBucket.CLASSIC.value: lambda year: year < CLASSIC_CUTOFF,
}


def year_predicate(bucket: str) -> Optional[Callable[[int], bool]]:
    """Return the year test for a bucket, or None when the bucket keeps every record"""
    return _PREDICATES.get(bucket)


def filter_by_year(records: List[MovieRecord], bucket: str) -> List[MovieRecord]:
    """Keep the records whose year falls in the bucket.

    "all" and buckets outside YearBucket return the records unchanged. Otherwise
    a record whose year has no leading integer is dropped.
    """
    bucket = getattr(bucket, "value", bucket)
    predicate = year_predicate(bucket)
    if predicate is None:
        return list(records)

    filtered = []
    for record in records:
        year = record.parsed_year
        if year is None:
            continue
        if predicate(year):
            filtered.append(record)
    return filtered
