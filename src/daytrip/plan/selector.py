"""
Place Selectors: Greedy algorithms for route building.

Three heuristics, one shared loop:
- MostPlacesSelector: shortest places first (maximize count)
- ImportanceSelector: most important places first
- HourlyValueSelector: highest importance per hour first

Every selector walks its ordering and accumulates duration. The first
place that would push the total past the available time ends the scan;
smaller places further down the order are never considered.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Type

from ..catalog import Place
from ..config import TripSettings
from .route import Route, format_number

logger = logging.getLogger(__name__)


class GreedyRouteSelector:
    """
    Base greedy selector.

    Subclasses only decide the visiting order; the budget walk is shared.
    """

    label = "Greedy"

    def __init__(self, settings: TripSettings):
        """
        Args:
            settings: Schedule with the available time and sort options
        """
        self.settings = settings

    def _order(self, places: Sequence[Place]) -> List[Place]:
        """Return a sorted working copy of the catalog."""
        raise NotImplementedError

    def build_route(self, places: Sequence[Place]) -> Route:
        """
        Build a route from the catalog.

        Args:
            places: Catalog to pick from (left untouched)

        Returns:
            Route whose total time never exceeds settings.available_time
        """
        available_time = self.settings.available_time
        route = Route()
        accumulated = 0.0

        for place in self._order(places):
            accumulated += place.duration
            if accumulated > available_time:
                logger.debug(
                    f"{self.label}: {place.name} ({format_number(place.duration)}h) "
                    f"overflows budget ({format_number(accumulated)}h > "
                    f"{format_number(available_time)}h); stopping"
                )
                break
            route.add_place(place)
            logger.debug(
                f"{self.label}: added {place.name} "
                f"(total: {format_number(accumulated)}h)"
            )

        logger.info(
            f"✅ {self.label}: {route.count()} places, "
            f"{format_number(route.total_time())}h, importance {route.total_importance()}"
        )
        return route


class MostPlacesSelector(GreedyRouteSelector):
    """Visit as many places as possible, regardless of importance."""

    label = "MaximizeCount"

    def _order(self, places: Sequence[Place]) -> List[Place]:
        ordered = list(places)
        if self.settings.presort_secondary:
            ordered.sort(key=lambda p: p.importance, reverse=True)
        ordered.sort(key=lambda p: p.duration)
        return ordered


class ImportanceSelector(GreedyRouteSelector):
    """
    Visit the most important places first.

    Relies on the stable sort: places of equal importance keep catalog order.
    """

    label = "MaximizeImportance"

    def _order(self, places: Sequence[Place]) -> List[Place]:
        ordered = list(places)
        if self.settings.presort_secondary:
            ordered.sort(key=lambda p: p.duration)
        ordered.sort(key=lambda p: p.importance, reverse=True)
        return ordered


@dataclass(frozen=True)
class HourlyValue:
    """Position of a catalog place plus its importance per hour."""

    index: int
    rate: float


def hourly_rate(place: Place) -> float:
    """Importance per hour. Free places rank first unless they are worthless."""
    if place.duration == 0:
        return math.inf if place.importance > 0 else 0.0
    return place.importance / place.duration


class HourlyValueSelector(GreedyRouteSelector):
    """Visit the places that give the most importance per hour spent."""

    label = "MaximizeRate"

    def _order(self, places: Sequence[Place]) -> List[Place]:
        rated = [HourlyValue(index, hourly_rate(place)) for index, place in enumerate(places)]
        if self.settings.presort_secondary:
            rated.sort(key=lambda hv: places[hv.index].duration)
        rated.sort(key=lambda hv: hv.rate, reverse=True)
        return [places[hv.index] for hv in rated]


SELECTORS: Dict[str, Type[GreedyRouteSelector]] = {
    "most_places": MostPlacesSelector,
    "importance": ImportanceSelector,
    "hourly_value": HourlyValueSelector,
}


def visit_most_places(places: Sequence[Place], settings: TripSettings) -> Route:
    return MostPlacesSelector(settings).build_route(places)


def visit_by_importance(places: Sequence[Place], settings: TripSettings) -> Route:
    return ImportanceSelector(settings).build_route(places)


def visit_by_hourly_value(places: Sequence[Place], settings: TripSettings) -> Route:
    return HourlyValueSelector(settings).build_route(places)


def select_route(
    places: Sequence[Place],
    settings: Optional[TripSettings] = None,
    selector_mode: str = "most_places",
) -> Route:
    """
    Build a route with the named selector.

    Args:
        places: Catalog to pick from
        settings: Schedule; defaults to the reference 48h window with 16h rest
        selector_mode: "most_places", "importance" or "hourly_value"

    Returns:
        Route built by the selector

    Raises:
        ValueError: If selector_mode is not a known selector
    """
    if selector_mode not in SELECTORS:
        raise ValueError(
            f"Unknown selector mode {selector_mode!r}; "
            f"expected one of {', '.join(SELECTORS)}"
        )
    if settings is None:
        settings = TripSettings()

    return SELECTORS[selector_mode](settings).build_route(places)
