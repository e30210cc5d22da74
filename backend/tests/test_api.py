import pytest

from config import settings


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == settings.app_name
    assert "skillGapAnalysis" in data["endpoints"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["profilesCount"] == 0
    assert "timestamp" in data


def test_career_paths(client):
    response = client.get("/api/career-paths")
    assert response.status_code == 200
    paths = response.json()["availablePaths"]
    assert paths[0] == {
        "id": "frontend-developer",
        "title": "Frontend Developer",
        "requiredSkillsCount": 8,
    }


class TestSkillGapAnalysis:
    def test_frontend_analysis(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": ["HTML", "CSS", "JavaScript", "jQuery"], "careerPath": "frontend-developer"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["careerPath"] == "Frontend Developer"
        assert data["userSkills"] == ["HTML", "CSS", "JavaScript", "jQuery"]

        analysis = data["analysis"]
        assert analysis["skillsMatched"] == ["html", "css", "javascript"]
        assert analysis["skillsMissing"] == ["react", "typescript", "git", "figma", "responsive design"]
        assert analysis["missingCount"] == 5
        assert [p["skill"] for p in analysis["learningPriority"]] == [
            "git", "react", "typescript", "figma", "responsive design",
        ]
        assert set(analysis["learningPriority"][0]) == {"skill", "reason"}

        assert data["readiness"] == {
            "percentage": 38,
            "level": "Beginner - Significant learning required",
            "totalRequired": 8,
            "currentlyHave": 3,
        }
        assert data["recommendations"] == {
            "nextSteps": ["Learn git", "Learn react", "Learn typescript"],
            "timeEstimate": "10-20 weeks",
        }

    def test_user_skills_must_be_array(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": "python", "careerPath": "data-scientist"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "userSkills must be an array of strings"

    def test_missing_user_skills(self, client):
        response = client.post("/api/skill-gap-analysis", json={"careerPath": "data-scientist"})
        assert response.status_code == 400

    def test_unknown_career_path(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": ["python"], "careerPath": "astronaut"},
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "Invalid career path"
        assert "data-scientist" in detail["availablePaths"]

    def test_non_string_career_path(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": ["python"], "careerPath": 5},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "Invalid career path"

    def test_user_skills_checked_before_career_path(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": "x", "careerPath": None},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "userSkills must be an array of strings"

    def test_non_string_skills_are_ignored(self, client):
        response = client.post(
            "/api/skill-gap-analysis",
            json={"userSkills": ["Python", 7, None, "  SQL "], "careerPath": "data-scientist"},
        )
        assert response.status_code == 200
        assert response.json()["analysis"]["skillsMatched"] == ["python", "sql"]

    def test_rate_limited(self, client, monkeypatch):
        monkeypatch.setattr(settings, "rate_limit", "2/minute")
        body = {"userSkills": [], "careerPath": "backend-developer"}
        assert client.post("/api/skill-gap-analysis", json=body).status_code == 200
        assert client.post("/api/skill-gap-analysis", json=body).status_code == 200
        assert client.post("/api/skill-gap-analysis", json=body).status_code == 429


class TestSkillPriority:
    def test_known_skill(self, client):
        response = client.get("/api/skill-priority/JavaScript")
        assert response.status_code == 200
        assert response.json() == {
            "skill": "javascript",
            "score": 95,
            "reason": "Critical skill — highly demanded across most career paths",
        }

    def test_unknown_skill_gets_default(self, client):
        data = client.get("/api/skill-priority/basket weaving").json()
        assert data["score"] == 50
        assert data["reason"].startswith("Nice-to-have skill")

    def test_skill_containing_slash(self, client):
        response = client.get("/api/skill-priority/ci/cd")
        assert response.status_code == 200
        assert response.json()["skill"] == "ci/cd"
        assert response.json()["score"] == 70

    def test_encoded_slash_and_space(self, client):
        data = client.get("/api/skill-priority/UI%2FUX%20Design").json()
        assert data["skill"] == "ui/ux design"
        assert data["score"] == 75

    def test_blank_skill(self, client):
        assert client.get("/api/skill-priority/%20%20").status_code == 400


class TestProfiles:
    def test_create_and_get(self, client):
        response = client.post(
            "/api/profile",
            json={
                "name": "  Ada Lovelace ",
                "skills": [" Python", "SQL "],
                "interests": ["AI"],
                "quizAnswers": {"q1": "analytical"},
            },
        )
        assert response.status_code == 201
        created = response.json()
        assert created == {"success": True, "id": 1, "message": "Profile created successfully"}

        response = client.get("/api/profile/1")
        assert response.status_code == 200
        profile = response.json()["data"]
        assert profile["name"] == "Ada Lovelace"
        assert profile["skills"] == ["Python", "SQL"]
        assert profile["interests"] == ["AI"]
        assert profile["quizAnswers"] == {"q1": "analytical"}
        assert profile["createdAt"] == profile["updatedAt"]

    def test_health_counts_profiles(self, client):
        client.post("/api/profile", json={"name": "Ada", "skills": ["python"]})
        assert client.get("/health").json()["profilesCount"] == 1

    def test_name_required(self, client):
        response = client.post("/api/profile", json={"name": "   ", "skills": ["python"]})
        assert response.status_code == 400
        assert response.json()["detail"] == "Name is required and must be a non-empty string"

    def test_skills_must_be_array(self, client):
        response = client.post("/api/profile", json={"name": "Ada", "skills": "python"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Skills is required and must be an array"

    def test_skills_not_empty(self, client):
        response = client.post("/api/profile", json={"name": "Ada", "skills": []})
        assert response.status_code == 400
        assert response.json()["detail"] == "Skills array cannot be empty"

    def test_skills_must_be_strings(self, client):
        response = client.post("/api/profile", json={"name": "Ada", "skills": ["python", 3]})
        assert response.status_code == 400
        assert response.json()["detail"] == "All skills must be non-empty strings"

    def test_get_invalid_id(self, client):
        response = client.get("/api/profile/abc")
        assert response.status_code == 400

    @pytest.mark.parametrize("raw", ["5_0", "%207", "1.0"])
    def test_get_rejects_loose_ids(self, client, raw):
        client.post("/api/profile", json={"name": "Ada", "skills": ["python"]})
        assert client.get(f"/api/profile/{raw}").status_code == 400

    def test_get_missing_profile(self, client):
        response = client.get("/api/profile/99")
        assert response.status_code == 404
        assert response.json()["detail"] == "Profile not found"

    def test_update_profile(self, client):
        client.post("/api/profile", json={"name": "Ada", "skills": ["python"]})
        response = client.put("/api/profile/1", json={"skills": ["python", "r programming"], "goals": "Data Scientist"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Ada"
        assert data["skills"] == ["python", "r programming"]
        assert data["goals"] == "Data Scientist"

    def test_update_validates_fields(self, client):
        client.post("/api/profile", json={"name": "Ada", "skills": ["python"]})
        assert client.put("/api/profile/1", json={"name": ""}).status_code == 400

    def test_update_missing_profile(self, client):
        assert client.put("/api/profile/5", json={"goals": "x"}).status_code == 404

    def test_list_profiles(self, client):
        client.post("/api/profile", json={"name": "Ada", "skills": ["python"]})
        client.post("/api/profile", json={"name": "Grace", "skills": ["cobol"]})
        data = client.get("/api/profiles").json()
        assert data["success"] is True
        assert data["count"] == 2
        assert [p["name"] for p in data["data"]] == ["Ada", "Grace"]


class TestApiKey:
    def test_not_required_in_development(self, client, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        monkeypatch.setattr(settings, "environment", "development")
        assert client.get("/api/career-paths").status_code == 200

    def test_required_outside_development(self, client, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        monkeypatch.setattr(settings, "environment", "production")
        assert client.get("/api/career-paths").status_code == 401
        response = client.get("/api/career-paths", headers={"X-API-Key": "secret"})
        assert response.status_code == 200

    def test_health_is_open(self, client, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        monkeypatch.setattr(settings, "environment", "production")
        assert client.get("/health").status_code == 200
