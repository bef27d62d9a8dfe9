"""Exception hierarchy for the Yuque client."""

from __future__ import annotations


class YuqueError(Exception):
    """Base class for every error raised by this package."""


class InternalError(YuqueError):
    """Response body could not be decoded into the expected records."""


class RequestFailed(YuqueError):
    """Transport failure or an unclassified non-success status."""


class _StatusError(YuqueError):
    message = ""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"{self.message}: {url}")


class InvalidParams(_StatusError):
    message = "Invalid params, the request parameters are incorrect or incomplete"


class InvalidUserInfo(_StatusError):
    message = "Invalid user info, the token is missing or rejected"


class NoPermission(_StatusError):
    message = "No permission for the requested operation"


class NotFound(_StatusError):
    message = "Not found, the data does not exist or is not public"


class ServerException(_StatusError):
    message = "Server exception"


class NotSupportFormat(YuqueError):
    """Document body format other than markdown where markdown is required."""

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(f"Not supported format: {format}")


_STATUS_ERRORS: dict[int, type[_StatusError]] = {
    400: InvalidParams,
    401: InvalidUserInfo,
    403: NoPermission,
    404: NotFound,
    500: ServerException,
}


def judge_status_code(status_code: int, url: str) -> None:
    """Raise the error matching an HTTP status, or return for success codes."""
    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is not None:
        raise error_cls(url)
    if status_code >= 400:
        raise RequestFailed(f"Unexpected status {status_code}: {url}")


class TocError(YuqueError):
    """Failure decoding or encoding a table of contents.

    ``section`` is ``"metadata"`` or ``"entries"``; ``detail`` holds the
    parser or validator message.
    """

    def __init__(self, section: str, detail: str) -> None:
        self.section = section
        self.detail = detail
        super().__init__(f"toc {section} block: {detail}")


class MetadataMissing(TocError):
    def __init__(self, detail: str = "metadata list is empty") -> None:
        super().__init__("metadata", detail)


class MalformedStructuredText(TocError):
    pass


class FieldTypeMismatch(TocError):
    pass


class UnknownTocEntryType(TocError):
    def __init__(self, entry_type: object, index: int) -> None:
        self.entry_type = entry_type
        self.index = index
        super().__init__("entries", f"unknown entry type {entry_type!r} at record {index}")


__all__ = [
    "YuqueError",
    "InternalError",
    "RequestFailed",
    "InvalidParams",
    "InvalidUserInfo",
    "NoPermission",
    "NotFound",
    "ServerException",
    "NotSupportFormat",
    "judge_status_code",
    "TocError",
    "MetadataMissing",
    "MalformedStructuredText",
    "FieldTypeMismatch",
    "UnknownTocEntryType",
]
