class DiffError(ValueError):
    """Base class for everything the library raises."""
