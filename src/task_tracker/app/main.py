import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from task_tracker.app.errors import install_error_handlers
from task_tracker.app.routes import tasks
from task_tracker.infra.db.task_repo_memory import InMemoryTaskRepo
from task_tracker.services.task_service import TaskService
from task_tracker.observability.logging import setup_logging
from task_tracker.app.middleware.access_log import AccessLogMiddleware

BANNER = "Task Tracker API"
logger = logging.getLogger("tracker.system")


def create_app(
    repo: Optional[InMemoryTaskRepo] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build the application with its own store. Every call gets a fresh,
    empty store unless `repo` is given.
    """
    setup_logging()

    app = FastAPI(title=BANNER)
    app.add_middleware(AccessLogMiddleware)
    install_error_handlers(app)

    # --- store wiring ---
    repo = repo if repo is not None else InMemoryTaskRepo(clock=clock)
    app.state.task_service = TaskService(repo)

    app.include_router(tasks.router)

    @app.on_event("startup")
    async def _startup():
        logger.info(
            "system.start",
            extra={"category": "system", "event": "system.start", "tasks": await repo.count()},
        )

    @app.on_event("shutdown")
    async def _shutdown():
        logger.info(
            "system.stop",
            extra={"category": "system", "event": "system.stop", "tasks": await repo.count()},
        )

    @app.get("/", response_class=PlainTextResponse)
    def home():
        return BANNER

    @app.get("/health")
    async def health(request: Request):
        return {"status": "ok", "tasks": await request.app.state.task_service.count()}

    return app
