class InvalidSpecError(ValueError):
    """
    Raised when calling code builds a spec or delta record that can never be valid.

    Not a SourcegraphError: it signals a bug in the caller, not bad input from the API.
    """
