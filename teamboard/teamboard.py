"""Teamboard Service - team collaboration backend (teams, projects, tasks, comments, activity feed)."""

from typing import Any, List, Optional

from fastapi import Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from urllib3.util.url import parse_url

from mindtrace.core import get_logger
from mindtrace.services import Service
from mindtrace.services.core.middleware import RequestLoggingMiddleware
from teamboard.core.auth_middleware import AuthMiddleware, current_user_id
from teamboard.core.config import TeamboardConfig, configure_logging, get_teamboard_config
from teamboard.core.exceptions import InternalFailure, TeamboardError
from teamboard.core.security import TokenService
from teamboard.db import TeamboardDB
from teamboard.models import (
    ActivityResponse,
    AuthResponse,
    CommentCreateRequest,
    CommentResponse,
    LoginPayload,
    Project,
    ProjectCreateRequest,
    SignupPayload,
    Task,
    TaskCreateRequest,
    TaskUpdateRequest,
    Team,
    TeamCreateRequest,
)
from teamboard.repositories import (
    ActivityRepository,
    CommentRepository,
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    UserRepository,
)
from teamboard.schemas import (
    CreateCommentSchema,
    CreateProjectSchema,
    CreateTaskSchema,
    CreateTeamSchema,
    DeleteCommentSchema,
    DeleteTaskSchema,
    ListActivitySchema,
    ListCommentsSchema,
    ListProjectsSchema,
    ListTasksSchema,
    ListTeamsSchema,
    LoginSchema,
    SignupSchema,
    UpdateTaskSchema,
)
from teamboard.services import (
    AccessPolicy,
    ActivityRecorder,
    AuthService,
    CommentService,
    ProjectService,
    TaskService,
    TeamService,
)


class TeamboardService(Service):
    """Team collaboration REST API.

    Every route under ``/api`` except signup and login requires ``Authorization: Bearer <token>``. Configuration is
    read from ``TEAMBOARD__*`` environment variables; construction fails with ``ConfigurationError`` when no JWT
    secret is configured.

    Example:
        ```python
        # Reads TEAMBOARD__* env vars
        TeamboardService.launch()

        # Explicit collaborators (tests)
        service = TeamboardService(config=config, db=fake_db)
        client = TestClient(service.app)
        ```
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        config: Optional[TeamboardConfig] = None,
        db: Optional[TeamboardDB] = None,
        token_service: Optional[TokenService] = None,
        enable_auth: bool | None = None,
        **kwargs,
    ):
        """Initialize TeamboardService.

        Args:
            url: Service URL override. Defaults to config.TEAMBOARD.URL.
            config: Configuration object. Defaults to get_teamboard_config().
            db: Storage handle. Defaults to a TeamboardDB built from MONGO_URI / MONGO_DB.
            token_service: Token issuer/verifier. Defaults to TokenService.from_config(config).
            enable_auth: Enable the bearer token middleware. Defaults to config.TEAMBOARD.AUTH_ENABLED.
            **kwargs: Passed to Service base class (e.g. ``pid_file`` from the launcher).
        """
        config = config or get_teamboard_config()
        cfg = config.TEAMBOARD
        configure_logging(cfg)

        # Fails fast when TEAMBOARD__JWT_SECRET is missing.
        tokens = token_service or TokenService.from_config(config)

        super().__init__(
            url=url or cfg.URL,
            summary="Teamboard Collaboration Service",
            description="Teams, projects, tasks, comments and a team activity feed behind bearer-token auth.",
            **kwargs,
        )
        self.config = config
        self.tokens = tokens
        self.logger = get_logger(self.unique_name, use_structlog=True)

        # Storage + repositories
        self.db = db or TeamboardDB(uri=cfg.MONGO_URI, db_name=cfg.MONGO_DB)
        self.users = UserRepository(self.db)
        self.teams = TeamRepository(self.db)
        self.projects = ProjectRepository(self.db)
        self.tasks = TaskRepository(self.db)
        self.comments = CommentRepository(self.db)
        self.activities = ActivityRepository(self.db)

        # Domain services
        self.access = AccessPolicy(self.teams, self.projects, self.tasks, self.comments)
        self.recorder = ActivityRecorder(self.activities, self.users, feed_limit=cfg.ACTIVITY_FEED_LIMIT)
        self.auth_service = AuthService(self.users, self.tokens)
        self.team_service = TeamService(self.teams)
        self.project_service = ProjectService(self.projects, self.access)
        self.task_service = TaskService(self.tasks, self.access, self.recorder)
        self.comment_service = CommentService(self.comments, self.users, self.access, self.recorder)

        # Middleware (last added runs first): logging -> CORS -> auth
        if enable_auth is None:
            enable_auth = cfg.AUTH_ENABLED
        self.app.add_middleware(AuthMiddleware, token_service=self.tokens, enabled=enable_auth)
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self.app.add_middleware(
            RequestLoggingMiddleware,
            service_name=self.name,
            log_metrics=True,
            add_request_id_header=True,
            logger=self.logger,
        )

        self._register_exception_handlers()

        # Endpoints
        self._register_auth_endpoints()
        self._register_team_endpoints()
        self._register_project_endpoints()
        self._register_task_endpoints()
        self._register_comment_endpoints()
        self._register_activity_endpoints()

    @classmethod
    def default_url(cls) -> Any:
        """Return default URL from config (respects TEAMBOARD__URL env var)."""
        return parse_url(get_teamboard_config().TEAMBOARD.URL)

    async def shutdown_cleanup(self):
        """Close database connection on shutdown."""
        await super().shutdown_cleanup()
        await self.db.disconnect()

    # -------------------------------------------------------------------------
    # Error mapping
    # -------------------------------------------------------------------------

    def _register_exception_handlers(self) -> None:
        self.app.add_exception_handler(TeamboardError, self._handle_teamboard_error)
        self.app.add_exception_handler(RequestValidationError, self._handle_validation_error)
        self.app.add_exception_handler(Exception, self._handle_unexpected_error)

    async def _handle_teamboard_error(self, request: Request, exc: TeamboardError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, "error": exc.code})

    async def _handle_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request", "error": "validation_failure", "errors": errors},
        )

    async def _handle_unexpected_error(self, request: Request, exc: Exception) -> JSONResponse:
        self.logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}", exc_info=exc)
        error = InternalFailure()
        return JSONResponse(status_code=error.status_code, content={"detail": error.detail, "error": error.code})

    # -------------------------------------------------------------------------
    # Endpoint registration
    # -------------------------------------------------------------------------

    def _register_auth_endpoints(self) -> None:
        self.add_endpoint(
            "/api/auth/signup",
            self.signup,
            schema=SignupSchema,
            methods=["POST"],
        )
        self.add_endpoint("/api/auth/login", self.login, schema=LoginSchema, methods=["POST"])

    def _register_team_endpoints(self) -> None:
        self.add_endpoint("/api/teams", self.list_teams, schema=ListTeamsSchema, methods=["GET"])
        self.add_endpoint(
            "/api/teams",
            self.create_team,
            schema=CreateTeamSchema,
            methods=["POST"],
        )

    def _register_project_endpoints(self) -> None:
        self.add_endpoint("/api/projects/{team_id}", self.list_projects, schema=ListProjectsSchema, methods=["GET"])
        self.add_endpoint(
            "/api/projects",
            self.create_project,
            schema=CreateProjectSchema,
            methods=["POST"],
        )

    def _register_task_endpoints(self) -> None:
        self.add_endpoint("/api/tasks/{project_id}", self.list_tasks, schema=ListTasksSchema, methods=["GET"])
        self.add_endpoint(
            "/api/tasks",
            self.create_task,
            schema=CreateTaskSchema,
            methods=["POST"],
        )
        self.add_endpoint("/api/tasks/{task_id}", self.update_task, schema=UpdateTaskSchema, methods=["PATCH"])
        self.add_endpoint("/api/tasks/{task_id}", self.delete_task, schema=DeleteTaskSchema, methods=["DELETE"])

    def _register_comment_endpoints(self) -> None:
        self.add_endpoint(
            "/api/comments",
            self.create_comment,
            schema=CreateCommentSchema,
            methods=["POST"],
        )
        self.add_endpoint(
            "/api/comments/{task_id}", self.list_comments, schema=ListCommentsSchema, methods=["GET"]
        )
        self.add_endpoint(
            "/api/comments/{comment_id}", self.delete_comment, schema=DeleteCommentSchema, methods=["DELETE"]
        )

    def _register_activity_endpoints(self) -> None:
        self.add_endpoint("/api/activity/{team_id}", self.list_activity, schema=ListActivitySchema, methods=["GET"])

    # -------------------------------------------------------------------------
    # Auth handlers
    # -------------------------------------------------------------------------

    async def signup(self, payload: SignupPayload) -> AuthResponse:
        """Create an account and return a bearer token for it."""
        return await self.auth_service.signup(payload)

    async def login(self, payload: LoginPayload) -> AuthResponse:
        """Exchange email and password for a bearer token."""
        return await self.auth_service.login(payload)

    # -------------------------------------------------------------------------
    # Team / project handlers
    # -------------------------------------------------------------------------

    async def list_teams(self, user_id: str = Depends(current_user_id)) -> List[Team]:
        """List the teams the caller is a member of."""
        return await self.team_service.list_teams(user_id)

    async def create_team(self, payload: TeamCreateRequest, user_id: str = Depends(current_user_id)) -> Team:
        return await self.team_service.create_team(payload, user_id)

    async def list_projects(self, team_id: str, user_id: str = Depends(current_user_id)) -> List[Project]:
        return await self.project_service.list_projects(team_id, user_id)

    async def create_project(
        self, payload: ProjectCreateRequest, user_id: str = Depends(current_user_id)
    ) -> Project:
        return await self.project_service.create_project(payload, user_id)

    # -------------------------------------------------------------------------
    # Task handlers
    # -------------------------------------------------------------------------

    async def list_tasks(self, project_id: str, user_id: str = Depends(current_user_id)) -> List[Task]:
        return await self.task_service.list_tasks(project_id, user_id)

    async def create_task(self, payload: TaskCreateRequest, user_id: str = Depends(current_user_id)) -> Task:
        return await self.task_service.create_task(payload, user_id)

    async def update_task(
        self, task_id: str, payload: TaskUpdateRequest, user_id: str = Depends(current_user_id)
    ) -> Task:
        """Apply a partial update. Moving a task to ``done`` records a task_completed activity."""
        return await self.task_service.update_task(task_id, payload, user_id)

    async def delete_task(self, task_id: str, user_id: str = Depends(current_user_id)) -> Task:
        return await self.task_service.delete_task(task_id, user_id)

    # -------------------------------------------------------------------------
    # Comment / activity handlers
    # -------------------------------------------------------------------------

    async def create_comment(
        self, payload: CommentCreateRequest, user_id: str = Depends(current_user_id)
    ) -> CommentResponse:
        return await self.comment_service.create_comment(payload, user_id)

    async def list_comments(self, task_id: str, user_id: str = Depends(current_user_id)) -> List[CommentResponse]:
        return await self.comment_service.list_comments(task_id, user_id)

    async def delete_comment(self, comment_id: str, user_id: str = Depends(current_user_id)) -> CommentResponse:
        return await self.comment_service.delete_comment(comment_id, user_id)

    async def list_activity(
        self, team_id: str, user_id: str = Depends(current_user_id)
    ) -> List[ActivityResponse]:
        """Most recent activity for a team, newest first."""
        await self.access.require_team(team_id, user_id)
        return await self.recorder.list_recent(team_id)
