"""
Report generation: run every selector and lay the routes out as text.

Sections appear in SELECTORS order, each headed by the selector label
and separated by a divider line.
"""

import json
import logging
from typing import List, Sequence, Tuple

from .catalog import Place
from .config import TripSettings
from .plan.route import Route
from .plan.selector import SELECTORS

logger = logging.getLogger(__name__)

DIVIDER = "\n\n=================================\n\n"


def build_report(places: Sequence[Place], settings: TripSettings) -> List[Tuple[str, Route]]:
    """
    Run each selector once against the same catalog and schedule.

    Args:
        places: Catalog to pick from
        settings: Shared schedule

    Returns:
        List of (label, Route) in report order
    """
    logger.info(
        f"Planning {len(places)} places within {settings.available_time:g}h "
        f"({settings.visit_window:g}h window, {settings.rest_time:g}h rest)"
    )

    results = []
    for selector_cls in SELECTORS.values():
        selector = selector_cls(settings)
        route = selector.build_route(places)
        logger.debug(f"{selector.label} route: {json.dumps(route.to_dict(), ensure_ascii=False)}")
        results.append((selector.label, route))
    return results


def render_section(label: str, route: Route) -> str:
    return f"\n [ {label} ] \n{route.render()}"


def render_report(results: Sequence[Tuple[str, Route]]) -> str:
    """Join the rendered routes into one text block."""
    return DIVIDER.join(render_section(label, route) for label, route in results)
