"""
Test configuration and fixtures for the file barrier.

This module provides common fixtures and configuration for all tests.
"""

import os
import sys
from typing import Generator

import pytest
from fastapi import Depends, FastAPI, UploadFile
from fastapi.testclient import TestClient

# Add the parent directory to the path so the package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from file_barrier.api.dependencies import require_allowed_file
from file_barrier.error_handling.handlers import register_exception_handlers
from file_barrier.models.validation import CheckLayer, FilePolicy
from file_barrier.validation.validators import FileBarrier
from tests.utils.fixtures import ALLOWED_CONTENT_TYPES, ALLOWED_EXTENSIONS, MockFileUpload


@pytest.fixture
def all_layers_policy() -> FilePolicy:
    """
    Fixture providing a policy that runs every layer with a 5 byte limit.

    Returns:
        FilePolicy: Policy with all layers selected
    """
    return FilePolicy(
        allowed_extensions=ALLOWED_EXTENSIONS,
        allowed_content_types=ALLOWED_CONTENT_TYPES,
        max_single_file_size=5,
        layers=(CheckLayer.ALL_LAYERS,),
    )


@pytest.fixture
def barrier(all_layers_policy: FilePolicy) -> FileBarrier:
    """Fixture providing a barrier over the all-layers policy."""
    return FileBarrier(all_layers_policy)


@pytest.fixture
def mock_text_file() -> MockFileUpload:
    """
    Fixture providing a mock text file for testing.

    Returns:
        MockFileUpload: Mock text file data
    """
    return MockFileUpload(filename="test.txt", content=b"text", content_type="text/plain")


@pytest.fixture
def mock_zip_file() -> MockFileUpload:
    """Fixture providing a one byte zip upload as sent by Windows browsers."""
    return MockFileUpload(filename="test.zip", content=b"P", content_type="application/x-zip-compressed")


@pytest.fixture
def upload_app(barrier: FileBarrier) -> FastAPI:
    """
    Fixture providing a FastAPI app with one guarded upload endpoint.

    Returns:
        FastAPI: App with barrier exception handlers installed
    """
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/upload")
    async def upload(file: UploadFile = Depends(require_allowed_file(barrier))):
        return {"filename": file.filename, "content_type": file.content_type}

    return app


@pytest.fixture
def test_client(upload_app: FastAPI) -> Generator[TestClient, None, None]:
    """
    FastAPI test client fixture for synchronous testing.

    Yields:
        TestClient: Configured FastAPI test client
    """
    with TestClient(upload_app) as client:
        yield client
