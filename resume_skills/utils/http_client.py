from __future__ import annotations

import httpx

ANALYZE_PATH = "/analyze_resume"
GENERATE_ALL_PATH = "/generate_all_skill_assessments"
GENERATE_ONE_PATH = "/generate_skill_assessment"


class BackendError(Exception):
    """A failed backend call, already phrased for display."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BackendClient:
    """Client for the resume analysis and assessment backend."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8001",
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
            headers={"User-Agent": "ResumeSkillPanel/1.0 (local tool)"},
        )

    def analyze_resume(self, filename: str, content: bytes, mime_type: str | None = None) -> dict:
        file_field = (filename, content, mime_type) if mime_type else (filename, content)
        return self._post(ANALYZE_PATH, files={"file": file_field})

    def generate_all_skill_assessments(self, skills: list[str], difficulty: str) -> dict:
        return self._post(GENERATE_ALL_PATH, json={"skills": list(skills), "difficulty": difficulty})

    def generate_skill_assessment(self, skills: list[str], difficulty: str) -> dict:
        return self._post(GENERATE_ONE_PATH, json={"skills": list(skills), "difficulty": difficulty})

    def _post(self, path: str, **kwargs) -> dict:
        try:
            resp = self._client.post(path, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise BackendError(str(e) or f"Request to {path} failed") from e

        if not resp.is_success:
            raise BackendError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise BackendError(f"Invalid JSON in response from {path}") from e
        if not isinstance(data, dict):
            data = {}

        if data.get("error"):
            raise BackendError(str(data["error"]))
        return data

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
