"""FastAPI application serving the shared counter."""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from .config import CounterSettings
from .errors import CounterError
from .logger import configure_root_logger, get_logger
from .schemas import EventResponse, HealthResponse, StateResponse
from .service import CounterService
from .version import SERVICE_NAME, get_service_version, log_service_startup
from .views import render

logger = get_logger(__name__)


def get_counter_service(request: Request) -> CounterService:
    """Dependency returning the service instance bound to the application."""
    return request.app.state.counter_service


def create_app(
    settings: CounterSettings | None = None,
    service: CounterService | None = None,
) -> FastAPI:
    settings = settings or CounterSettings.from_env()
    service = service or CounterService(
        history_size=settings.history_size,
        session_max_age=settings.session_max_age,
    )
    version = get_service_version()

    app = FastAPI(
        title="Atomic Counter",
        version=version,
        description="One shared counter, incremented by team plus and decremented by team minus.",
    )
    app.state.counter_service = service
    app.state.settings = settings

    @app.on_event("startup")
    def _on_startup() -> None:
        # Uvicorn installs its own handlers before startup; take them over again.
        configure_root_logger(settings.log_level, force=True)
        log_service_startup(settings.host, settings.port, version)
        logger.info("Settings: %s", settings.to_dict())

    @app.exception_handler(CounterError)
    async def _counter_error_handler(request: Request, exc: CounterError):
        return PlainTextResponse(
            str(exc),
            status_code=exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/", response_class=HTMLResponse)
    def index(
        request: Request,
        counter_service: CounterService = Depends(get_counter_service),
    ):
        view = counter_service.render(request.headers.get("cookie"))
        return HTMLResponse(render(view, refresh_seconds=settings.refresh_seconds))

    @app.post("/")
    async def submit(
        request: Request,
        counter_service: CounterService = Depends(get_counter_service),
    ):
        body = (await request.body()).decode("utf-8", errors="replace")
        result = counter_service.apply(body, request.headers.get("cookie"))

        response = RedirectResponse(url=result.location, status_code=result.status_code)
        for cookie in result.cookies:
            response.headers.append("set-cookie", cookie)
        return response

    @app.get("/api/state", response_model=StateResponse)
    def state(counter_service: CounterService = Depends(get_counter_service)):
        """Current value and recent events as JSON, timestamps included."""
        return StateResponse(
            value=counter_service.value,
            events=[EventResponse.model_validate(e) for e in counter_service.events()],
        )

    @app.get("/healthz", response_model=HealthResponse)
    def healthcheck():
        return HealthResponse(status="ok", service=SERVICE_NAME, version=version)

    return app
