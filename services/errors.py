class PostalLookupError(Exception):
    """Transport-level failure talking to the CEP lookup service."""


class UnknownFieldError(KeyError):
    """update_field() called with a name that is not an editable form field."""
