"""Client-side helper class for communicating with a running Teamboard service."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from urllib3.util.url import Url, parse_url

from mindtrace.core import Mindtrace, get_logger
from mindtrace.services import Heartbeat, ServerStatus
from teamboard.models import (
    ActivityResponse,
    AuthResponse,
    CommentResponse,
    Project,
    Task,
    TaskStatus,
    Team,
)


class TeamboardClientError(Exception):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, detail: str, error: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        self.error = error
        super().__init__(f"{status_code}: {detail}")


class TeamboardClient(Mindtrace):
    """Synchronous HTTP client for the Teamboard REST API.

    ``signup`` and ``login`` store the returned bearer token; every later call sends it.

    Example::

        with TeamboardClient("http://localhost:5000") as client:
            client.login("ada@example.com", "pw123")
            team = client.create_team("Alpha")
            project = client.create_project("Launch", team.id)
            task = client.create_task("Write docs", project.id)
            client.update_task(task.id, status=TaskStatus.DONE)
    """

    def __init__(
        self,
        url: str | Url = "http://localhost:5000",
        token: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.url = parse_url(str(url))
        self.token = token
        self._http = httpx.Client(base_url=str(self.url), timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TeamboardClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = self._http.request(method, path, json=json, headers=headers)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            detail = body.get("detail") or response.text or response.reason_phrase
            self.logger.debug(f"{method} {path} failed with {response.status_code}: {detail}")
            raise TeamboardClientError(response.status_code, str(detail), body.get("error"))
        return response.json()

    # -------------------------------------------------------------------------
    # Service
    # -------------------------------------------------------------------------

    @property
    def status(self) -> ServerStatus:
        """Status of the server, ``DOWN`` when it cannot be reached."""
        try:
            return ServerStatus(self._request("POST", "/status")["status"])
        except (httpx.HTTPError, TeamboardClientError) as e:
            self.logger.warning(f"Failed to get status of server at {self.url}: {e}")
            return ServerStatus.DOWN

    def heartbeat(self) -> Heartbeat:
        data = self._request("POST", "/heartbeat")["heartbeat"]
        return Heartbeat(**{**data, "status": ServerStatus(data["status"])})

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def signup(self, name: str, email: str, password: str) -> AuthResponse:
        auth = AuthResponse.model_validate(
            self._request("POST", "/api/auth/signup", {"name": name, "email": email, "password": password})
        )
        self.token = auth.token
        return auth

    def login(self, email: str, password: str) -> AuthResponse:
        auth = AuthResponse.model_validate(
            self._request("POST", "/api/auth/login", {"email": email, "password": password})
        )
        self.token = auth.token
        return auth

    # -------------------------------------------------------------------------
    # Teams / projects
    # -------------------------------------------------------------------------

    def list_teams(self) -> List[Team]:
        return [Team.model_validate(t) for t in self._request("GET", "/api/teams")]

    def create_team(self, name: str, description: Optional[str] = None) -> Team:
        return Team.model_validate(self._request("POST", "/api/teams", {"name": name, "description": description}))

    def list_projects(self, team_id: str) -> List[Project]:
        return [Project.model_validate(p) for p in self._request("GET", f"/api/projects/{team_id}")]

    def create_project(self, name: str, team_id: str, description: Optional[str] = None) -> Project:
        body = {"name": name, "description": description, "team": team_id}
        return Project.model_validate(self._request("POST", "/api/projects", body))

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    def list_tasks(self, project_id: str) -> List[Task]:
        return [Task.model_validate(t) for t in self._request("GET", f"/api/tasks/{project_id}")]

    def create_task(
        self,
        title: str,
        project_id: str,
        description: Optional[str] = None,
        assignee: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        body = {
            "title": title,
            "description": description,
            "project": project_id,
            "assignee": assignee,
            "dueDate": due_date.isoformat() if due_date else None,
        }
        return Task.model_validate(self._request("POST", "/api/tasks", body))

    def update_task(self, task_id: str, **changes: Any) -> Task:
        """Send only the given fields. Keys use Python names (``due_date``) and are sent camelCased."""
        body: Dict[str, Any] = {}
        for key, value in changes.items():
            if isinstance(value, TaskStatus):
                value = value.value
            elif isinstance(value, datetime):
                value = value.isoformat()
            body["dueDate" if key == "due_date" else key] = value
        return Task.model_validate(self._request("PATCH", f"/api/tasks/{task_id}", body))

    def delete_task(self, task_id: str) -> Task:
        return Task.model_validate(self._request("DELETE", f"/api/tasks/{task_id}"))

    # -------------------------------------------------------------------------
    # Comments / activity
    # -------------------------------------------------------------------------

    def list_comments(self, task_id: str) -> List[CommentResponse]:
        return [CommentResponse.model_validate(c) for c in self._request("GET", f"/api/comments/{task_id}")]

    def create_comment(self, task_id: str, text: str) -> CommentResponse:
        return CommentResponse.model_validate(self._request("POST", "/api/comments", {"text": text, "task": task_id}))

    def delete_comment(self, comment_id: str) -> CommentResponse:
        return CommentResponse.model_validate(self._request("DELETE", f"/api/comments/{comment_id}"))

    def list_activity(self, team_id: str) -> List[ActivityResponse]:
        return [ActivityResponse.model_validate(a) for a in self._request("GET", f"/api/activity/{team_id}")]
