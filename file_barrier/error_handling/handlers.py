"""Error translation and HTTP error responses for rejected uploads."""

import datetime
import json
import logging
import re
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from file_barrier.models.errors import (
    ErrorCategory,
    ErrorKind,
    ErrorResult,
    ErrorSeverity,
    MissingArgumentError,
    PolicyViolationError,
)
from file_barrier.models.validation import ValidationOutcome

logger = logging.getLogger(__name__)

_BASE64_PATTERN = re.compile(r"data:[^;]+;base64,[A-Za-z0-9+/]{50,}={0,2}|[A-Za-z0-9+/]{100,}={0,2}")
MAX_TECHNICAL_MESSAGE_LENGTH = 500


class ErrorMessageTranslator:
    """Translates rejections and faults to user-friendly messages with suggested actions."""

    def __init__(self):
        """Initialize the translator with predefined message mappings."""
        self._kind_rules: Dict[ErrorKind, Dict[str, Any]] = {
            ErrorKind.INVALID_EXTENSION: {
                "user_message": "This file type is not supported. Please select a supported file format.",
                "suggested_actions": [
                    "Check the list of supported file extensions",
                    "Convert your file to a supported format",
                ],
                "severity": ErrorSeverity.MEDIUM,
                "category": ErrorCategory.VALIDATION,
                "status_code": 415,
            },
            ErrorKind.CONTENT_TYPE_EXTENSION_MISMATCH: {
                "user_message": "The file's type does not match its extension.",
                "suggested_actions": [
                    "Make sure the file extension matches the actual file format",
                    "Re-save the file in the intended format and upload it again",
                ],
                "severity": ErrorSeverity.HIGH,
                "category": ErrorCategory.VALIDATION,
                "status_code": 415,
            },
            ErrorKind.INVALID_CONTENT_TYPE: {
                "user_message": "This file's content type is not accepted.",
                "suggested_actions": [
                    "Check the list of supported file types",
                    "Try uploading a different file",
                ],
                "severity": ErrorSeverity.MEDIUM,
                "category": ErrorCategory.VALIDATION,
                "status_code": 415,
            },
            ErrorKind.FILE_SIZE_EXCEEDED: {
                "user_message": "The file you selected is too large. Please choose a smaller file.",
                "suggested_actions": [
                    "Try compressing the file before uploading",
                    "Split the content into several smaller files",
                ],
                "severity": ErrorSeverity.MEDIUM,
                "category": ErrorCategory.VALIDATION,
                "status_code": 413,
            },
            ErrorKind.UNKNOWN: {
                "user_message": "The file could not be validated. Please try again.",
                "suggested_actions": [
                    "Try your upload again",
                    "Contact support with the error ID if the problem persists",
                ],
                "severity": ErrorSeverity.HIGH,
                "category": ErrorCategory.SYSTEM,
                "status_code": 500,
            },
        }
        self._configuration_rule: Dict[str, Any] = {
            "user_message": "There's a configuration issue. Please contact support.",
            "suggested_actions": ["Contact technical support", "Report this error with the error ID"],
            "severity": ErrorSeverity.CRITICAL,
            "category": ErrorCategory.CONFIGURATION,
            "status_code": 500,
        }

    def translate_outcome(self, outcome: ValidationOutcome) -> ErrorResult:
        """
        Translate a rejected outcome to a user-friendly error result.

        Args:
            outcome: Rejected validation outcome

        Returns:
            ErrorResult: User-friendly error result
        """
        error_kind = outcome.error_kind or ErrorKind.UNKNOWN
        return self._build_result(self._kind_rules[error_kind], error_kind.name, outcome.error_message or "", error_kind)

    def translate_error(self, exception: Exception) -> ErrorResult:
        """
        Translate an exception to a user-friendly error result.

        Args:
            exception: The exception to translate

        Returns:
            ErrorResult: User-friendly error result
        """
        if isinstance(exception, PolicyViolationError):
            rule = self._kind_rules[exception.error_kind]
            return self._build_result(rule, exception.error_kind.name, str(exception), exception.error_kind)

        if isinstance(exception, MissingArgumentError):
            return self._build_result(self._configuration_rule, "MISSING_ARGUMENT", str(exception))

        return self._build_result(
            self._kind_rules[ErrorKind.UNKNOWN], type(exception).__name__, str(exception), ErrorKind.UNKNOWN
        )

    def _build_result(
        self,
        rule: Dict[str, Any],
        code_prefix: str,
        technical_message: str,
        error_kind: Optional[ErrorKind] = None,
    ) -> ErrorResult:
        timestamp = int(datetime.datetime.now().timestamp())
        return ErrorResult(
            error_id=uuid.uuid4().hex,
            error_code=f"{code_prefix}_{timestamp}",
            severity=rule["severity"],
            category=rule["category"],
            technical_message=self._sanitize_technical_message(technical_message),
            user_message=rule["user_message"],
            status_code=rule["status_code"],
            error_kind=error_kind,
            suggested_actions=list(rule["suggested_actions"]),
        )

    def _sanitize_technical_message(self, message: str) -> str:
        """
        Sanitize technical message so client supplied names cannot flood logs.

        Args:
            message: Raw technical message

        Returns:
            str: Sanitized message safe for logging
        """
        message = _BASE64_PATTERN.sub("[BASE64_CONTENT_TRUNCATED]", message)
        if len(message) > MAX_TECHNICAL_MESSAGE_LENGTH:
            message = message[:MAX_TECHNICAL_MESSAGE_LENGTH] + "... [TRUNCATED]"
        return message


class ErrorHandler:
    """Main error handler: translates, then logs."""

    def __init__(self, message_translator: Optional[ErrorMessageTranslator] = None):
        self.message_translator = message_translator or ErrorMessageTranslator()

    def handle_outcome(self, outcome: ValidationOutcome) -> ErrorResult:
        """Translate and log a rejected outcome."""
        error_result = self.message_translator.translate_outcome(outcome)
        self._log_error(error_result)
        return error_result

    def handle_error(self, exception: Exception) -> ErrorResult:
        """Translate and log an exception raised while guarding an upload."""
        error_result = self.message_translator.translate_error(exception)
        self._log_error(error_result)
        return error_result

    def _log_error(self, error_result: ErrorResult) -> None:
        """Log error with appropriate level based on severity."""
        log_data = {
            "error_id": error_result.error_id,
            "error_code": error_result.error_code,
            "error_kind": error_result.error_kind.value if error_result.error_kind else None,
            "category": error_result.category.value,
            "severity": error_result.severity.value,
            "technical_message": error_result.technical_message,
        }

        if error_result.severity == ErrorSeverity.CRITICAL:
            logger.critical(f"Critical error: {json.dumps(log_data)}")
        elif error_result.severity == ErrorSeverity.HIGH:
            logger.error(f"High severity error: {json.dumps(log_data)}")
        elif error_result.severity == ErrorSeverity.MEDIUM:
            logger.warning(f"Medium severity error: {json.dumps(log_data)}")
        else:
            logger.info(f"Low severity error: {json.dumps(log_data)}")


class ErrorResponseHandler:
    """Renders error results as JSON responses."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        self.error_handler = error_handler or ErrorHandler()

    def json_response(self, error_result: ErrorResult) -> JSONResponse:
        return JSONResponse(
            status_code=error_result.status_code,
            content={
                "error": True,
                "error_id": error_result.error_id,
                "error_code": error_result.error_code,
                "error_kind": error_result.error_kind.value if error_result.error_kind else None,
                "message": error_result.user_message,
                "detail": error_result.technical_message,
                "suggested_actions": error_result.suggested_actions,
                "severity": error_result.severity.value,
                "category": error_result.category.value,
            },
        )

    async def handle_policy_violation(self, request: Request, exc: PolicyViolationError) -> JSONResponse:
        error_result = self.error_handler.handle_error(exc)
        if exc.error_kind is ErrorKind.UNKNOWN:
            # Unexpected fault text describes internals, keep it out of the body
            error_result.technical_message = ""
        return self.json_response(error_result)

    async def handle_missing_argument(self, request: Request, exc: MissingArgumentError) -> JSONResponse:
        error_result = self.error_handler.handle_error(exc)
        # The technical message describes server configuration, keep it out of the body
        error_result.technical_message = ""
        return self.json_response(error_result)


def register_exception_handlers(app: FastAPI, error_handler: Optional[ErrorHandler] = None) -> None:
    """Install JSON exception handlers for barrier errors on a FastAPI app."""
    response_handler = ErrorResponseHandler(error_handler)
    app.add_exception_handler(PolicyViolationError, response_handler.handle_policy_violation)
    app.add_exception_handler(MissingArgumentError, response_handler.handle_missing_argument)
