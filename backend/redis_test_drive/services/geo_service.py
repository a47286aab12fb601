"""
Geo Service Module

Seeds the geospatial set of points of interest.
"""

import logging
from collections.abc import Iterable

from redis_test_drive.common.constants import GEO_SET_KEY
from redis_test_drive.domain.geo import SEED_POINTS, GeoPoint
from redis_test_drive.services.namespace_service import NamespaceService

logger = logging.getLogger(__name__)


class GeoService(NamespaceService):
    """
    Geo Service

    Seeded points live as members of GEO_SET_KEY, keyed by label. delete() addresses
    top-level keys of the geo database, not members of that set.
    """

    async def seed(self, points: Iterable[GeoPoint] = SEED_POINTS) -> int:
        """
        Add each point to the geo set, re-seeding updates existing members in place

        Returns:
            int: Number of members newly added
        """
        added = 0
        for point in points:
            added += await self.repo.geo_add(GEO_SET_KEY, point.longitude, point.latitude, point.label)

        logger.info("Seeded %s with %d new members", GEO_SET_KEY, added)
        return added
