"""Parking lot search predicates."""

from typing import Callable, Iterable, Iterator, List

from app.models import ParkingLot
from app.schemas.parking_lot import ParkingLotSearch
from app.store.rules import rating_value

Predicate = Callable[[ParkingLot], bool]


def search_predicates(filters: ParkingLotSearch) -> Iterator[Predicate]:
    """Yield one predicate per active filter, in a fixed order."""
    yield lambda lot: lot.status == "active"

    if filters.search:
        needle = filters.search.lower()
        yield lambda lot: needle in lot.name.lower() or needle in lot.address.lower()

    if filters.available_only:
        yield lambda lot: lot.current_motorcycle_spots > 0 or lot.current_car_spots > 0

    max_price = filters.max_price
    if filters.vehicle_type == "motorcycle":
        yield lambda lot: lot.motorcycle_capacity > 0
        if max_price is not None:
            yield lambda lot: lot.motorcycle_price <= max_price
    elif filters.vehicle_type == "car":
        yield lambda lot: lot.car_capacity > 0
        if max_price is not None:
            yield lambda lot: lot.car_price <= max_price

    if filters.min_rating is not None:
        min_rating = filters.min_rating
        yield lambda lot: rating_value(lot.rating) >= min_rating


def filter_parking_lots(lots: Iterable[ParkingLot], filters: ParkingLotSearch) -> List[ParkingLot]:
    """Narrow ``lots`` by each predicate in turn."""
    result = list(lots)
    for predicate in search_predicates(filters):
        result = [lot for lot in result if predicate(lot)]
    return result
