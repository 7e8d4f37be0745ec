from wintergreen.builder import BuildResult, Failure, Success, build, build_batch
from wintergreen.config import configure
from wintergreen.errors import ConstructionFailure, InvalidArgument, MarkerConflict, WintergreenError
from wintergreen.factories import Factory
from wintergreen.fields import FieldDescriptor, describe
from wintergreen.markers import RandomInt, RandomString
from wintergreen.randomizer import Randomizer, random_int, random_string

__all__ = [
    "BuildResult",
    "ConstructionFailure",
    "Factory",
    "Failure",
    "FieldDescriptor",
    "InvalidArgument",
    "MarkerConflict",
    "RandomInt",
    "RandomString",
    "Randomizer",
    "Success",
    "WintergreenError",
    "build",
    "build_batch",
    "configure",
    "describe",
    "random_int",
    "random_string",
]
