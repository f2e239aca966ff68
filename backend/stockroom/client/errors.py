"""Client-side error taxonomy. None of these escape a controller action."""


class ClientError(Exception):
    """Base for failures surfaced to the user as an inline message or alert."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FragmentLoadError(ClientError):
    """A view fragment could not be fetched (network error, bad response)."""

    def __init__(self, view_id: str, message: str | None = None):
        self.view_id = view_id
        super().__init__(message or f"Failed to load view: {view_id}")


class FragmentNotFound(FragmentLoadError):
    def __init__(self, view_id: str):
        super().__init__(view_id, f"View not found: {view_id}")


class ApiRequestError(ClientError):
    """
    The REST API answered with an error, or could not be reached.

    status is None for network failures.
    """

    def __init__(self, status: int | None, message: str):
        self.status = status
        super().__init__(message)


class ValidationError(ClientError):
    pass


class DuplicateProductError(ValidationError):
    pass


class InsufficientStockError(ValidationError):
    pass
