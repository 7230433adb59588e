from fastapi import HTTPException, status
from typing import Optional, Sequence

from tinytok.messages.tokenize_messages import SEGMENTATION_FAILED, UNSUPPORTED_SEGMENTER


class APIException(HTTPException):
    """Flexible API Exception."""

    def __init__(self, status_code: int, code: str, message: Optional[str] = None):
        detail = {"code": code, "message": message or "An error occurred"}
        super().__init__(status_code=status_code, detail=detail)


class BadRequestError(APIException):
    """400 Bad Request Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, code=code, message=message
        )


class UnsupportedSegmenterError(BadRequestError):
    """400 for a segmenter name outside the configured methods."""

    def __init__(self, choices: Sequence[str]):
        super().__init__(
            code="UNSUPPORTED_SEGMENTER",
            message=UNSUPPORTED_SEGMENTER.format(choices=", ".join(choices)),
        )


class SegmentationFailedError(BadRequestError):
    """400 when the segmenter rejects the submitted text."""

    def __init__(self):
        super().__init__(code="SEGMENTATION_FAILED", message=SEGMENTATION_FAILED)


class InputTooLargeError(BadRequestError):
    """400 for a text or batch over the configured limits."""

    def __init__(self, code: str, message: str, limit: int):
        super().__init__(code=code, message=message.format(limit=limit))
