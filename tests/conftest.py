import pytest
from fastapi.testclient import TestClient

from file_service.dependencies.storage import get_storage
from file_service.main import app
from file_service.storage.local import LocalStorageBackend

# Small cap so size-limit tests stay fast
TEST_MAX_UPLOAD_SIZE_MB = 1


@pytest.fixture
def storage_dir(tmp_path):
    """Isolated storage directory for each test."""
    return tmp_path / "uploads"


@pytest.fixture
def storage(storage_dir):
    """Create a storage backend with temporary directory."""
    return LocalStorageBackend(base_path=str(storage_dir), max_size_mb=TEST_MAX_UPLOAD_SIZE_MB)


@pytest.fixture
def client(storage):
    """Test client with the storage dependency pointed at the temporary directory."""

    def override_get_storage():
        return storage

    app.dependency_overrides[get_storage] = override_get_storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
