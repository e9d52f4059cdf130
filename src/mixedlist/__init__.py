"""A list that holds values of any type and compares them by type and value.

See README.md for complete documentation and usage examples.
"""

from mixedlist.errors import BoundsError, MixedListError, NotFoundError
from mixedlist.mixedlist import NOT_FOUND, mixedlist, strict_equals

__all__ = ["NOT_FOUND", "BoundsError", "MixedListError", "NotFoundError", "mixedlist", "strict_equals"]
