"""Domain-level exceptions.

Every failure while building or rendering a packing slip is expressed as a
subclass of PackingSlipException so the CLI layer can catch them uniformly
and collapse them into a single exit status.
"""


class PackingSlipException(Exception):
    """Base class for all packing slip errors."""


class ValidationError(PackingSlipException):
    """An input document is malformed or an invariant was violated."""


class EntityNotFoundError(PackingSlipException):
    """A requested entity does not exist."""


class UnresolvableCatalogReferenceError(EntityNotFoundError):
    """An order entry names a catalog number the catalog does not contain."""


class RenderingError(PackingSlipException):
    """The packing slip document could not be written."""
