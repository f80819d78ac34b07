#Marks geo as a package.
#Re-exports the coordinate value type so other modules can do
#`from geo import Point` without knowing internal file names.
#No business logic.

from .point import Point, MIN_COORDINATE, MAX_COORDINATE

__all__ = [
    "Point",
    "MIN_COORDINATE",
    "MAX_COORDINATE",
]
