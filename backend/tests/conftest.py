"""
Pytest configuration and shared fixtures.
Run from the backend directory: python -m pytest tests/ -v
"""
import os
import sys
from pathlib import Path

# Set env vars before any app imports (ensures deterministic test behavior)
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "test-token")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_TO_FILE", "false")

# Ensure the backend directory is on path when running tests
BACKEND_DIR = Path(__file__).resolve().parent.parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest

from docintake.core.config import ProcessorConfig
from docintake.services.document_processor import DocumentProcessor

from helpers import FakeFileClient


@pytest.fixture
def config():
    return ProcessorConfig(bot_token="test-token", api_base_url="https://files.example.test/")


@pytest.fixture
def file_client():
    return FakeFileClient()


@pytest.fixture
def processor(config, file_client):
    return DocumentProcessor(config, file_client=file_client)
