from typing import Any


class RequestFailure(Exception):
    """Raised when a CoinGecko request fails for any reason.

    ``message`` holds the remote service's own status message when it sent one,
    otherwise the transport error's message, otherwise the raw error text.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: Any = None,
        cause: BaseException | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.cause = cause
        super().__init__(message)
