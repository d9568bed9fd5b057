"""
Test suite for job-related endpoints and functionality.

Tests cover:
- Job creation
- Job retrieval and search
- Partial updates
- Error handling
"""

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest

NEW_JOB = {
    "title": "New Job",
    "salary": 70000,
    "equity": 0.05,
    "companyHandle": "c1",
}


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_as_admin(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json=NEW_JOB, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert {k: job[k] for k in NEW_JOB} == NEW_JOB

    def test_create_as_non_admin(self, client, u1_headers):
        response = client.post("/api/v1/jobs/", json=NEW_JOB, headers=u1_headers)
        assert response.status_code == 403

    def test_create_missing_fields(self, client, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={"title": "New Job", "salary": 70000},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_create_invalid_salary(self, client, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={**NEW_JOB, "salary": "not-a-number"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_create_equity_above_one(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json={**NEW_JOB, "equity": 1.5}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_duplicate(self, client, admin_headers):
        client.post("/api/v1/jobs/", json=NEW_JOB, headers=admin_headers)
        response = client.post("/api/v1/jobs/", json=NEW_JOB, headers=admin_headers)

        assert response.status_code == 400
        assert "duplicate" in response.json()["detail"].lower()

    def test_create_unknown_company(self, client, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={**NEW_JOB, "companyHandle": "nope"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "No company: nope"


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_list_jobs(self, client):
        response = client.get("/api/v1/jobs/")

        assert response.status_code == 200
        titles = [j["title"] for j in response.json()["jobs"]]
        assert titles == ["Accountant", "Data Engineer", "Senior Software Engineer", "Software Engineer"]

    def test_list_jobs_filtered(self, client):
        response = client.get("/api/v1/jobs/", params={"title": "software", "salary": 120000})

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert len(jobs) == 1
        assert jobs[0]["title"] == "Senior Software Engineer"
        assert jobs[0]["companyHandle"] == "c3"

    def test_list_jobs_by_equity(self, client):
        response = client.get("/api/v1/jobs/", params={"equity": 0.01})
        titles = [j["title"] for j in response.json()["jobs"]]
        assert titles == ["Senior Software Engineer", "Software Engineer"]

    def test_list_jobs_bad_salary(self, client):
        response = client.get("/api/v1/jobs/", params={"salary": "lots"})
        assert response.status_code == 422

    def test_get_job_by_id(self, client, job_ids):
        job_id = job_ids["Accountant"]
        response = client.get(f"/api/v1/jobs/{job_id}")

        assert response.status_code == 200
        assert response.json() == {"job": {
            "id": job_id,
            "title": "Accountant",
            "salary": 60000,
            "equity": None,
            "companyHandle": "c2",
        }}

    def test_get_nonexistent_job(self, client):
        response = client.get("/api/v1/jobs/99999")

        assert response.status_code == 404
        assert "no job" in response.json()["detail"].lower()


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_as_admin(self, client, admin_headers, job_ids):
        job_id = job_ids["Accountant"]
        response = client.patch(
            f"/api/v1/jobs/{job_id}",
            json={"title": "Senior Accountant", "salary": 65000},
            headers=admin_headers,
        )

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["title"] == "Senior Accountant"
        assert job["salary"] == 65000
        assert job["companyHandle"] == "c2"

    def test_update_anonymous(self, client, job_ids):
        response = client.patch(f"/api/v1/jobs/{job_ids['Accountant']}", json={"title": "x"})
        assert response.status_code == 401

    def test_update_company_not_allowed(self, client, admin_headers, job_ids):
        response = client.patch(
            f"/api/v1/jobs/{job_ids['Accountant']}",
            json={"companyHandle": "c3"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_update_null_title_rejected(self, client, admin_headers, job_ids):
        response = client.patch(
            f"/api/v1/jobs/{job_ids['Accountant']}",
            json={"title": None},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_update_clears_salary(self, client, admin_headers, job_ids):
        response = client.patch(
            f"/api/v1/jobs/{job_ids['Accountant']}",
            json={"salary": None},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["job"]["salary"] is None

    def test_update_nonexistent(self, client, admin_headers):
        response = client.patch("/api/v1/jobs/0", json={"title": "x"}, headers=admin_headers)
        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, admin_headers, job_ids):
        job_id = job_ids["Accountant"]
        response = client.delete(f"/api/v1/jobs/{job_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": job_id}
        assert client.get(f"/api/v1/jobs/{job_id}").status_code == 404

    def test_delete_as_non_admin(self, client, u1_headers, job_ids):
        response = client.delete(f"/api/v1/jobs/{job_ids['Accountant']}", headers=u1_headers)
        assert response.status_code == 403

    def test_delete_nonexistent_job(self, client, admin_headers):
        response = client.delete("/api/v1/jobs/0", headers=admin_headers)
        assert response.status_code == 404


class TestJobCrud:
    """Direct data-access tests"""

    def test_create_returns_row(self, db_session):
        job = job_crud.create(db_session, JobCreateRequest(title="Chef", salary=50000, company_handle="c3"))

        assert job["title"] == "Chef"
        assert job["equity"] is None
        assert job["companyHandle"] == "c3"

    def test_update_appends_id_after_values(self, db_session, job_ids):
        job_id = job_ids["Data Engineer"]
        job = job_crud.update(db_session, job_id, {"salary": 85000, "equity": 0.02})

        assert job["id"] == job_id
        assert job["salary"] == 85000
        assert job["equity"] == 0.02

    def test_update_empty(self, db_session, job_ids):
        with pytest.raises(ValidationError):
            job_crud.update(db_session, job_ids["Data Engineer"], {})

    def test_get_nonexistent(self, db_session):
        with pytest.raises(NotFoundError):
            job_crud.get(db_session, 0)
