"""Shared fixtures: a fresh task store and an HTTP client per test."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_service.core.config import Settings
from todo_service.infrastructure.tasks.in_memory_task_repository import (
    InMemoryTaskRepositoryAdapter,
)
from todo_service.main import create_app


@pytest.fixture
def repository() -> InMemoryTaskRepositoryAdapter:
    """An empty in-memory task store."""
    return InMemoryTaskRepositoryAdapter()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with rate limiting off so suites can fire many requests."""
    return Settings(rate_limit_enabled=False, docs_enabled=True, log_level="WARNING")


@pytest.fixture
def app(test_settings: Settings, repository: InMemoryTaskRepositoryAdapter) -> FastAPI:
    return create_app(test_settings, repository=repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
