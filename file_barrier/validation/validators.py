"""File admission checks and the layered validation pipeline."""

import logging
from typing import FrozenSet, Iterable, List, Optional

from file_barrier.models.errors import (
    ContentTypeMismatchError,
    ErrorKind,
    FileSizeExceededError,
    InvalidContentTypeError,
    InvalidExtensionError,
    MissingArgumentError,
    PolicyViolationError,
)
from file_barrier.models.validation import (
    CheckLayer,
    FileDescriptor,
    FilePolicy,
    ValidationOutcome,
    ValidationRequest,
)
from file_barrier.validation.mime_types import get_extension, get_mime_type

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _split_list(value: str) -> List[str]:
    """Split a comma separated list, dropping blanks and normalizing case."""
    return [item.strip().lower() for item in value.split(",") if item.strip()]


class LayerSelector:
    """Answers which layers a call asked for, honoring the ALL_LAYERS wildcard."""

    def __init__(self, layers: Optional[Iterable[CheckLayer]]):
        self._layers: FrozenSet[CheckLayer] = frozenset(layers or ())
        self._all_layers = CheckLayer.ALL_LAYERS in self._layers

    def is_selected(self, layer: CheckLayer) -> bool:
        return self._all_layers or layer in self._layers

    def __contains__(self, layer: CheckLayer) -> bool:
        return self.is_selected(layer)

    def __bool__(self) -> bool:
        return bool(self._layers)


class PreconditionChecker:
    """Rejects calls that lack an input one of their selected layers needs."""

    @staticmethod
    def check(file: Optional[FileDescriptor], request: ValidationRequest, selector: LayerSelector) -> None:
        """
        Validate that required inputs are present for the selected layers.

        Args:
            file: The uploaded file descriptor
            request: Flattened request for this call
            selector: Selected layers

        Raises:
            MissingArgumentError: Naming the first missing parameter
        """
        if file is None:
            raise MissingArgumentError("file")

        if not selector:
            raise MissingArgumentError("layers")

        if _is_blank(request.allowed_extensions) and selector.is_selected(CheckLayer.CHECK_EXTENSIONS):
            raise MissingArgumentError("allowed_extensions")

        if _is_blank(request.allowed_content_types) and selector.is_selected(CheckLayer.CHECK_CONTENT_TYPE):
            raise MissingArgumentError("allowed_content_types")

        if request.max_single_file_size is None and selector.is_selected(CheckLayer.CHECK_FILE_SIZE):
            raise MissingArgumentError("max_single_file_size")


class ExtensionValidator:
    """Validates a file name's extension against the allowed extensions."""

    def __init__(self, allowed_extensions: str):
        self.allowed_extensions = allowed_extensions
        # Same normalization as ASP.NET's FileExtensionsAttribute: spaces and dots are ignored
        self._allowed = {ext.replace(".", "") for ext in _split_list(allowed_extensions.replace(" ", ""))}
        self._allowed.discard("")

    def validate(self, file_name: Optional[str]) -> None:
        """
        Validate the extension of a file name.

        Args:
            file_name: Name as claimed by the client

        Raises:
            InvalidExtensionError: If the extension is not allowed
        """
        extension = get_extension(file_name).lower()
        if not extension or extension not in self._allowed:
            raise InvalidExtensionError(
                f"File extension of {file_name!r} could not be found in the allowed extensions "
                f"({self.allowed_extensions})."
            )


class ContentTypeValidator:
    """Validates a content-type against the allowed content types."""

    def __init__(self, allowed_content_types: str):
        self.allowed_content_types = allowed_content_types
        self._allowed = _split_list(allowed_content_types)

    def is_allowed(self, content_type: Optional[str]) -> bool:
        # The given value may itself list several equivalent types, as produced by the MIME lookup
        candidates = _split_list(content_type or "")
        return any(candidate in self._allowed for candidate in candidates)

    def validate(self, content_type: Optional[str]) -> None:
        """
        Validate a content-type, or any of a comma separated set of equivalents.

        Args:
            content_type: Declared or expected content-type

        Raises:
            InvalidContentTypeError: If no given type is allowed
        """
        if not self.is_allowed(content_type):
            raise InvalidContentTypeError(
                f"File content-type {content_type!r} could not be found in the allowed content types "
                f"({self.allowed_content_types})."
            )


class ContentTypeConsistencyValidator:
    """Checks that the declared content-type is one the file extension implies."""

    def __init__(self, content_type_validator: Optional[ContentTypeValidator] = None):
        # When set, the allow-list is applied to the expected type rather than the declared one
        self.content_type_validator = content_type_validator

    def validate(self, file_name: Optional[str], content_type: Optional[str]) -> str:
        """
        Validate the declared content-type against the file extension.

        Args:
            file_name: Name as claimed by the client
            content_type: Content-type declared by the client

        Returns:
            str: Expected content-type(s), comma joined, "" if the extension is unknown

        Raises:
            ContentTypeMismatchError: If the declared type is not among the expected ones
            InvalidContentTypeError: If the allow-list is active and the expected type is not allowed
        """
        extension = get_extension(file_name)
        expected_content_type = get_mime_type(extension)
        logger.debug(f"Expected content-type for extension {extension!r}: {expected_content_type!r}")

        if expected_content_type:
            declared = (content_type or "").strip().lower()
            expected = expected_content_type.lower().split(",")
            if declared not in expected:
                raise ContentTypeMismatchError(
                    f"Content-type of the file name {expected_content_type} does not match "
                    f"the content-type of the given file {content_type}."
                )

        if self.content_type_validator is not None:
            if not expected_content_type:
                raise InvalidContentTypeError(
                    f"No known content-type for the extension of {file_name!r}, it cannot be matched "
                    f"against the allowed content types ({self.content_type_validator.allowed_content_types})."
                )
            self.content_type_validator.validate(expected_content_type)

        return expected_content_type


class SizeValidator:
    """Validates file sizes against configured limits."""

    def __init__(self, max_file_size: int):
        self.max_file_size = max_file_size

    def validate_size(self, file_size: Optional[int]) -> None:
        """
        Validate file size against the limit. An unknown size passes.

        Args:
            file_size: Size of the file in bytes

        Raises:
            FileSizeExceededError: If file size is over the limit
        """
        if file_size is not None and file_size > self.max_file_size:
            raise FileSizeExceededError(
                f"File size {file_size} bytes exceeds maximum allowed size {self.max_file_size} bytes"
            )


class FileBarrier:
    """Main admission pipeline: runs the selected layers in order, stopping at the first violation."""

    def __init__(self, policy: FilePolicy):
        self.policy = policy

    def evaluate(self, file: Optional[FileDescriptor]) -> None:
        """
        Run the pipeline, raising the first violation found.

        Order: extension, content-type to extension consistency, content-type
        allow-list, size.

        Args:
            file: Uploaded file descriptor

        Raises:
            MissingArgumentError: If the call lacks an input a selected layer needs
            PolicyViolationError: For the first failing check
        """
        request = ValidationRequest.build(file, self.policy)
        selector = LayerSelector(request.layers)

        PreconditionChecker.check(file, request, selector)

        if selector.is_selected(CheckLayer.CHECK_EXTENSIONS):
            logger.debug(f"Checking extension of {request.file_name!r}")
            ExtensionValidator(request.allowed_extensions).validate(request.file_name)

        content_type_validator = None
        if selector.is_selected(CheckLayer.CHECK_CONTENT_TYPE):
            content_type_validator = ContentTypeValidator(request.allowed_content_types)

        if selector.is_selected(CheckLayer.CHECK_CONTENT_TYPE_TO_EXTENSION):
            logger.debug(f"Checking content-type {request.content_type!r} against {request.file_name!r}")
            ContentTypeConsistencyValidator(content_type_validator).validate(request.file_name, request.content_type)
        elif content_type_validator is not None:
            logger.debug(f"Checking content-type {request.content_type!r}")
            content_type_validator.validate(request.content_type)

        if selector.is_selected(CheckLayer.CHECK_FILE_SIZE):
            logger.debug(f"Checking size {request.size} of {request.file_name!r}")
            SizeValidator(request.max_single_file_size).validate_size(request.size)

    def is_allowed(self, file: Optional[FileDescriptor]) -> ValidationOutcome:
        """
        Evaluate a file and describe the result.

        Args:
            file: Uploaded file descriptor

        Returns:
            ValidationOutcome: Allowed, or rejected with error kind and message

        Raises:
            MissingArgumentError: If the call lacks an input a selected layer needs
        """
        try:
            self.evaluate(file)
        except MissingArgumentError:
            raise
        except PolicyViolationError as e:
            logger.info(f"File {getattr(file, 'filename', None)!r} rejected ({e.error_kind.value}): {e}")
            return ValidationOutcome.reject(e.error_kind, str(e))
        except Exception as e:
            logger.error(f"File validation error: {e}", exc_info=True)
            return ValidationOutcome.reject(ErrorKind.UNKNOWN, str(e))

        return ValidationOutcome()

    def is_file_allowed(self, file: Optional[FileDescriptor]) -> bool:
        """
        Evaluate a file without details.

        Returns:
            bool: True if the file passed every selected layer

        Raises:
            MissingArgumentError: If the call lacks an input a selected layer needs
        """
        return self.is_allowed(file).is_allowed


def is_allowed(
    file: Optional[FileDescriptor],
    allowed_extensions: Optional[str],
    allowed_content_types: Optional[str],
    max_single_file_size: Optional[int],
    *layers: CheckLayer,
) -> ValidationOutcome:
    """
    Check if the file is allowed, returning the reason when it is not.

    Args:
        file: Uploaded file descriptor (filename, content_type, size)
        allowed_extensions: Comma separated, e.g. "txt,pdf,doc,docx". Needed for CHECK_EXTENSIONS.
        allowed_content_types: Comma separated, e.g. "text/plain,application/pdf". Needed for CHECK_CONTENT_TYPE.
        max_single_file_size: Accepted size in bytes. Needed for CHECK_FILE_SIZE.
        *layers: The check-points the file should go through

    Returns:
        ValidationOutcome: Whether the file is allowed, with error kind and message if not
    """
    policy = FilePolicy(
        allowed_extensions=allowed_extensions,
        allowed_content_types=allowed_content_types,
        max_single_file_size=max_single_file_size,
        layers=layers,
    )
    return FileBarrier(policy).is_allowed(file)


def is_file_allowed(
    file: Optional[FileDescriptor],
    allowed_extensions: Optional[str],
    allowed_content_types: Optional[str],
    max_single_file_size: Optional[int],
    *layers: CheckLayer,
) -> bool:
    """Same as is_allowed, collapsed to a boolean."""
    return is_allowed(file, allowed_extensions, allowed_content_types, max_single_file_size, *layers).is_allowed
