"""
Tests for analysis API endpoints.
"""

from careervalid.core.exceptions import UpstreamError


class TestAnalyzeGitHub:
    def test_returns_camel_case_github_data(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/github",
            json={"sessionId": session_id, "profileUrl": "https://github.com/octocat"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["languageStats"] == [
            {"language": "Go", "percentage": 75, "bytes": 300},
            {"language": "Rust", "percentage": 25, "bytes": 100},
        ]
        assert data["stats"] == {"totalRepos": 8, "totalStars": 16, "totalForks": 3}

        session = client.get(f"/api/session/{session_id}").json()["session"]
        assert session["githubData"]["insights"] == "GitHub insights"

    def test_upstream_failure_returns_500(self, client, session_id, mock_github_client) -> None:
        mock_github_client.fetch_user_and_repos.side_effect = UpstreamError(
            "GitHub API error: 404", service="github", status_code=404
        )

        response = client.post(
            "/api/analyze/github",
            json={"sessionId": session_id, "profileUrl": "https://github.com/ghost"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == (
            "Failed to analyze GitHub profile. Please try again."
        )

    def test_unknown_session_returns_404(self, client) -> None:
        response = client.post(
            "/api/analyze/github",
            json={"sessionId": "missing", "profileUrl": "https://github.com/octocat"},
        )

        assert response.status_code == 404

    def test_missing_profile_url_returns_400(self, client, session_id) -> None:
        response = client.post("/api/analyze/github", json={"sessionId": session_id})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestAnalyzeResume:
    def test_stores_resume_with_score(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/resume",
            json={
                "sessionId": session_id,
                "fileContent": "Jane Doe, software engineer",
                "fileName": "cv.pdf",
                "fileType": "pdf",
            },
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["score"] == 82
        assert data["fileName"] == "cv.pdf"

    def test_unsupported_file_type_returns_400(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/resume",
            json={
                "sessionId": session_id,
                "fileContent": "text",
                "fileName": "cv.txt",
                "fileType": "txt",
            },
        )

        assert response.status_code == 400


class TestAnalyzePortfolio:
    def test_stores_portfolio(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/portfolio",
            json={"sessionId": session_id, "portfolioUrl": "https://jane.dev/"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Jane Doe"

    def test_submitted_url_is_stored_unchanged(
        self, client, session_id, mock_portfolio_fetcher
    ) -> None:
        response = client.post(
            "/api/analyze/portfolio",
            json={"sessionId": session_id, "portfolioUrl": "https://jane.dev"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["url"] == "https://jane.dev"
        mock_portfolio_fetcher.fetch.assert_awaited_once_with("https://jane.dev")
        session = client.get(f"/api/session/{session_id}").json()["session"]
        assert session["portfolioData"]["url"] == "https://jane.dev"

    def test_non_http_url_returns_400(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/portfolio",
            json={"sessionId": session_id, "portfolioUrl": "ftp://jane.dev/"},
        )

        assert response.status_code == 400

    def test_invalid_url_returns_400(self, client, session_id) -> None:
        response = client.post(
            "/api/analyze/portfolio",
            json={"sessionId": session_id, "portfolioUrl": "not a url"},
        )

        assert response.status_code == 400
