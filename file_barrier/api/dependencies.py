"""FastAPI dependencies guarding upload endpoints."""

import logging
from typing import Awaitable, Callable

from fastapi import File, UploadFile

from file_barrier.models.errors import ErrorKind, policy_error_for
from file_barrier.models.validation import ValidationOutcome
from file_barrier.validation.validators import FileBarrier

logger = logging.getLogger(__name__)


def check_upload(barrier: FileBarrier, upload: UploadFile) -> ValidationOutcome:
    """
    Evaluate an upload without raising on rejection.

    Args:
        barrier: Configured file barrier
        upload: FastAPI UploadFile

    Returns:
        ValidationOutcome: Outcome of the evaluation
    """
    return barrier.is_allowed(upload)


def require_allowed_file(barrier: FileBarrier) -> Callable[[UploadFile], Awaitable[UploadFile]]:
    """
    Build a dependency that admits the `file` form field or rejects the request.

    Rejections are raised as PolicyViolationError subclasses; install
    register_exception_handlers on the app to render them as JSON.

    Args:
        barrier: Configured file barrier

    Returns:
        Callable: FastAPI dependency returning the admitted UploadFile
    """

    async def allowed_file(file: UploadFile = File(...)) -> UploadFile:
        outcome = check_upload(barrier, file)
        if not outcome.is_allowed:
            error_kind = outcome.error_kind or ErrorKind.UNKNOWN
            raise policy_error_for(error_kind, outcome.error_message or "File rejected")

        logger.debug(f"Upload {file.filename!r} admitted")
        return file

    return allowed_file
