class PatchError(Exception):
    """Base class for every failure the engine reports to its caller."""

    kind = "PatchError"
