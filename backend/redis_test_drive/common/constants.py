"""
Cache Constants

Database index usage and well-known keys shared across the namespace controllers.
"""

from enum import IntEnum


class Namespace(IntEnum):
    """Redis database index reserved for each datatype"""

    GLOBAL = 0
    STRINGS = 1
    # Reserved, no controller exposes hashes or lists yet
    HASHES = 2
    LISTS = 3
    SETS = 4
    GEO = 5


# Geo Database Keys
GEO_SET_KEY = "points.of.interest"
