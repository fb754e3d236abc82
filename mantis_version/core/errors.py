# core/errors.py


class PublishError(Exception):
    """Base class for everything that can abort a version publish run."""


class ValidationError(PublishError):
    pass


class NetworkError(PublishError):
    """The request never got a response (DNS, connection reset, timeout)."""


class TransportError(PublishError):
    """MantisHub answered with a status code outside 2xx."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Request failed with status code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(PublishError):
    pass


class LookupFailed(PublishError):
    pass


class NotFoundError(LookupFailed):
    def __init__(self, project_name: str):
        super().__init__(f'Project with name "{project_name}" not found.')
        self.project_name = project_name


class EmptyResultError(LookupFailed):
    def __init__(self, message: str = "No results found"):
        super().__init__(message)
