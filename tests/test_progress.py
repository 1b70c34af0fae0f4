"""Tests for study progress API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from studyhub import schemas
from studyhub.storage import DatabaseStorage


class TestProgressCrud:
    """Test suite for GET/PUT/DELETE /progress/:id endpoints."""

    def test_progress_lifecycle(
        self,
        client: TestClient,
        database_storage: DatabaseStorage,
        api_study_set: schemas.StudySet,
    ) -> None:
        progress = database_storage.create_progress(
            {"user_id": api_study_set.user_id, "study_set_id": api_study_set.id}
        )

        fetched = client.get(f"/api/v1/progress/{progress.id}")
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["study_set_id"] == api_study_set.id

        touched = client.put(f"/api/v1/progress/{progress.id}")
        assert touched.status_code == status.HTTP_200_OK
        assert touched.json()["last_studied_at"] >= fetched.json()["last_studied_at"]

        deleted = client.delete(f"/api/v1/progress/{progress.id}")
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/progress/{progress.id}").status_code == 404

    def test_progress_not_found(self, client: TestClient) -> None:
        assert client.get("/api/v1/progress/99999").status_code == 404
        assert client.put("/api/v1/progress/99999").status_code == 404
        assert client.delete("/api/v1/progress/99999").status_code == 204
