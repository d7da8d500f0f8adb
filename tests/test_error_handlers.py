"""
Tests for the global exception handlers.
"""

import logging

from sqlalchemy.exc import OperationalError

from app.core.database import get_db
from main import app


class UnreachableDatabaseSession:
    """Session stand-in whose every query fails as if the server went away"""

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT job_updates.id", {}, Exception("connection refused"))

    def rollback(self):
        pass


class TestDatabaseErrors:
    """Tests for the SQLAlchemyError handler"""

    def test_database_error_becomes_generic_500(self, client, caplog):
        app.dependency_overrides[get_db] = lambda: UnreachableDatabaseSession()

        with caplog.at_level(logging.ERROR):
            response = client.get("/api/v1/job-updates")

        assert response.status_code == 500
        assert response.json() == {"detail": "Database error"}
        assert any(
            "Database error on GET /api/v1/job-updates" in record.getMessage()
            for record in caplog.records
        )

    def test_sql_is_not_leaked(self, client):
        app.dependency_overrides[get_db] = lambda: UnreachableDatabaseSession()

        response = client.delete("/api/v1/job-updates/1")

        assert response.status_code == 500
        assert "SELECT" not in response.text
        assert "connection refused" not in response.text


class TestCrudErrors:
    """Tests for the CrudError handler"""

    def test_not_found_is_logged_as_warning(self, client, caplog):
        with caplog.at_level(logging.WARNING):
            response = client.get("/api/v1/job-updates/12345")

        assert response.status_code == 404
        warnings = [r for r in caplog.records if r.name == "app.api.error_handlers"]
        assert warnings and warnings[0].levelno == logging.WARNING
        assert "RecordNotFoundError" in warnings[0].getMessage()
