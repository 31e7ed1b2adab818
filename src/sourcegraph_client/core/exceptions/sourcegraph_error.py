class SourcegraphError(Exception):
    """
    Base class for all recoverable client errors.
    Ensures a consistent exception hierarchy for catching API-specific issues.
    """

    pass
