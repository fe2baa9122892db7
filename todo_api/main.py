# todo_api/main.py

from typing import Optional

from fastapi import FastAPI

from todo_api import __version__
from todo_api.api.todos import router as todos_router
from todo_api.config import Settings, configure_logging, get_settings
from todo_api.errors import register_exception_handlers
from todo_api.middleware import install_stages, log_requests, redirect_legacy_paths
from todo_api.services.task_store import TaskStore, build_task_store


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.title,
        version=__version__,
    )
    # one store per app, handed to handlers through Depends(get_store)
    app.state.store = store if store is not None else build_task_store(settings.store_backend)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(todos_router)
    register_exception_handlers(app)

    install_stages(
        app,
        [
            redirect_legacy_paths(
                settings.legacy_prefix,
                todos_router.prefix,
                settings.redirect_status_code,
            ),
            log_requests,
        ],
    )
    return app


app = create_app()
