"""Relay exceptions, mapped onto HTTP responses in main.create_app."""


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequest(RelayError):
    status_code = 400


class UpstreamFailure(RelayError):
    status_code = 502

    def __init__(self, reason: str, url: str | None = None) -> None:
        super().__init__(f"Upstream search request failed: {reason}")
        self.reason = reason
        self.url = url
