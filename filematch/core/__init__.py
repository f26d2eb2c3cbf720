"""FileMatch Core - constants, record access and check validation.

Import specific functions from submodules:
    from filematch.core import constants
    from filematch.core import record
    from filematch.core import validators
"""

from filematch.core import constants, record, validators

__all__ = [
    "constants",
    "record",
    "validators",
]
