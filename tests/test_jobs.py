"""
Test suite for job-related endpoints.

Tests cover:
- Job creation and the ownership check
- Job retrieval and the owner filter
- Field replacement
- Deletion with cascade to applications
- Malformed ids
"""

from bson import ObjectId

from app.core.security import create_access_token


class TestJobCreation:
    """Tests for POST /jobs"""

    def test_create_job_success(self, client, login, sample_job_data):
        """Owner creates a job and gets the new id back"""
        login("u@x.com")

        response = client.post("/jobs", json=sample_job_data)

        assert response.status_code == 200
        data = response.json()
        assert data["acknowledged"] is True
        assert ObjectId.is_valid(data["insertedId"])

    def test_create_job_for_someone_else_forbidden(self, client, login, sample_job_data):
        """userEmail must match the token's email; nothing is stored otherwise"""
        login("b@y.com")

        response = client.post("/jobs", json=sample_job_data)

        assert response.status_code == 403
        assert response.json()["detail"] == "forbidden access"
        assert client.get("/jobs").json() == []

    def test_create_job_without_user_email_forbidden(self, client, login):
        login("u@x.com")

        response = client.post("/jobs", json={"jobTitle": "Engineer"})

        assert response.status_code == 403

    def test_unlisted_fields_pass_through(self, client, login, sample_job_data):
        """Fields the API does not know about are stored verbatim"""
        login("u@x.com")
        sample_job_data["remote"] = True

        job_id = client.post("/jobs", json=sample_job_data).json()["insertedId"]
        job = client.get(f"/jobs/{job_id}").json()

        assert job["remote"] is True
        assert job["vacancy"] == 2

    def test_body_stored_verbatim_without_user_email(self, client, sample_job_data):
        """An identity without email may post a job without userEmail; no null is added"""
        client.cookies.set("token", create_access_token({"name": "No Email"}))
        body = {key: value for key, value in sample_job_data.items() if key != "userEmail"}

        job_id = client.post("/jobs", json=body).json()["insertedId"]
        job = client.get(f"/jobs/{job_id}").json()

        assert "userEmail" not in job
        assert job["jobTitle"] == sample_job_data["jobTitle"]


class TestJobRetrieval:
    """Tests for GET /jobs, GET /jobs/{id} and GET /jobFilter"""

    def test_get_job_by_id(self, client, posted_job, sample_job_data):
        response = client.get(f"/jobs/{posted_job}")

        assert response.status_code == 200
        data = response.json()
        assert data["_id"] == posted_job
        assert data["jobTitle"] == sample_job_data["jobTitle"]

    def test_get_nonexistent_job_is_null(self, client):
        response = client.get(f"/jobs/{ObjectId()}")

        assert response.status_code == 200
        assert response.json() is None

    def test_get_malformed_id(self, client):
        response = client.get("/jobs/not-an-object-id")

        assert response.status_code == 400
        assert response.json()["detail"] == "invalid id"

    def test_list_jobs(self, client, login, sample_job_data):
        """Every job is listed, whoever owns it"""
        for email in ("u@x.com", "v@x.com", "w@x.com"):
            login(email)
            client.post("/jobs", json={**sample_job_data, "userEmail": email})

        response = client.get("/jobs")

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_job_filter_returns_own_jobs(self, client, login, sample_job_data):
        login("v@x.com")
        client.post("/jobs", json={**sample_job_data, "userEmail": "v@x.com"})
        login("u@x.com")
        client.post("/jobs", json=sample_job_data)

        response = client.get("/jobFilter", params={"email": "u@x.com"})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["userEmail"] == "u@x.com"

    def test_job_filter_other_email_forbidden(self, client, login, posted_job):
        login("b@y.com")

        response = client.get("/jobFilter", params={"email": "a@x.com"})

        assert response.status_code == 403
        assert "detail" in response.json()
        assert not isinstance(response.json(), list)

    def test_job_filter_without_email_forbidden(self, client, login, posted_job):
        """A token carrying an email never matches a missing query email"""
        login("u@x.com")

        response = client.get("/jobFilter")

        assert response.status_code == 403


class TestJobUpdate:
    """Tests for PATCH /updatePost/{id}"""

    def test_update_replaces_fields(self, client, posted_job, sample_job_data):
        updated = {**sample_job_data, "jobTitle": "Senior Engineer", "vacancy": 3}

        response = client.patch(f"/updatePost/{posted_job}", json=updated)

        assert response.status_code == 200
        data = response.json()
        assert data["matchedCount"] == 1
        assert data["modifiedCount"] == 1

        job = client.get(f"/jobs/{posted_job}").json()
        assert job["jobTitle"] == "Senior Engineer"
        assert job["vacancy"] == 3

    def test_update_needs_no_token(self, client, posted_job, sample_job_data):
        client.cookies.clear()

        response = client.patch(f"/updatePost/{posted_job}", json=sample_job_data)

        assert response.status_code == 200

    def test_missing_fields_become_null(self, client, posted_job):
        client.patch(f"/updatePost/{posted_job}", json={"jobTitle": "Only Title"})

        job = client.get(f"/jobs/{posted_job}").json()
        assert job["jobTitle"] == "Only Title"
        assert job["companyName"] is None
        assert job["userEmail"] is None

    def test_update_overwrites_applicant_count(self, client, posted_job, sample_job_data):
        client.patch(f"/updatePost/{posted_job}", json={**sample_job_data, "jobApplicantsNumber": 7})

        assert client.get(f"/jobs/{posted_job}").json()["jobApplicantsNumber"] == 7

    def test_update_keeps_non_string_values(self, client, posted_job, sample_job_data):
        """Values are written as sent, whatever their JSON type"""
        updated = {**sample_job_data, "salaryRange": 5000, "jobPostingDate": 1704844800000}

        response = client.patch(f"/updatePost/{posted_job}", json=updated)

        assert response.status_code == 200
        job = client.get(f"/jobs/{posted_job}").json()
        assert job["salaryRange"] == 5000
        assert job["jobPostingDate"] == 1704844800000

    def test_update_unknown_job(self, client, sample_job_data):
        response = client.patch(f"/updatePost/{ObjectId()}", json=sample_job_data)

        assert response.status_code == 200
        assert response.json()["matchedCount"] == 0


class TestJobDeletion:
    """Tests for DELETE /deleteJob/{id}"""

    def test_delete_job(self, client, posted_job):
        response = client.delete(f"/deleteJob/{posted_job}")

        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert client.get(f"/jobs/{posted_job}").json() is None

    def test_delete_twice_reports_zero(self, client, posted_job):
        client.delete(f"/deleteJob/{posted_job}")

        response = client.delete(f"/deleteJob/{posted_job}")

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0

    def test_delete_cascades_to_applications(self, client, posted_job):
        client.post("/seekers", json={"jobId": posted_job, "seekerEmail": "s@y.com"})
        client.post("/seekers", json={"jobId": posted_job, "seekerEmail": "t@y.com"})
        other_job = str(ObjectId())
        client.post("/seekers", json={"jobId": other_job, "seekerEmail": "s@y.com"})

        client.delete(f"/deleteJob/{posted_job}")

        remaining = client.get("/seekers", params={"email": "s@y.com"}).json()
        assert [entry["jobId"] for entry in remaining] == [other_job]
        assert client.get("/seekers", params={"email": "t@y.com"}).json() == []

    def test_delete_malformed_id(self, client):
        response = client.delete("/deleteJob/123")

        assert response.status_code == 400
