# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import List, Optional
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import (
    auth_router,
    contact_router,
    face_router,
    memory_router,
    realtime_router,
    status_router,
    upload_router,
)
from .api.web import LoginRequiredError, pages_router
from .application.services.face_recognition_service import FaceRecognitionService
from .application.use_cases.memory.recognize_memory_faces import RecognizeMemoryFacesUseCase
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db import RealtimeListener, initialize_firebase, is_firebase_ready
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.notifications import WebSocketManager
from .infrastructure.recognition import RecognitionWorker

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Global instances
_realtime_listener: Optional[RealtimeListener] = None
_recognition_worker: Optional[RecognitionWorker] = None


def create_recognition_worker() -> RecognitionWorker:
    settings = get_settings()
    container = get_container()

    async def recognize(image_id: str) -> None:
        await container.get(RecognizeMemoryFacesUseCase).execute(image_id)

    return RecognitionWorker(recognize=recognize, max_attempts=settings.recognition_max_attempts)


def create_realtime_listener(
    websocket_manager: WebSocketManager,
    recognition_worker: Optional[RecognitionWorker],
) -> RealtimeListener:
    async def on_images_change(image_ids: List[str]) -> None:
        if recognition_worker is not None and image_ids:
            queued = recognition_worker.enqueue_many(image_ids)
            if queued:
                logger.info("Queued %d memories for face recognition", queued)
        await websocket_manager.notify_memories_changed()

    return RealtimeListener(
        loop=asyncio.get_running_loop(),
        on_status_change=websocket_manager.notify_status_changed,
        on_images_change=on_images_change,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Initializes Firebase, starts the recognition worker (loading the face
    models in the background) and attaches the realtime database listeners.
    """
    global _realtime_listener, _recognition_worker

    settings = get_settings()
    initialize_firebase()
    container = get_container()
    websocket_manager = container.get(WebSocketManager)

    models_task = None
    if settings.recognition_enabled:
        recognition_service = container.get(FaceRecognitionService)
        models_task = asyncio.create_task(recognition_service.load_models())
        _recognition_worker = create_recognition_worker()
        _recognition_worker.start()
    else:
        logger.info("Face recognition disabled (RECOGNITION_ENABLED=false)")

    if is_firebase_ready():
        try:
            _realtime_listener = create_realtime_listener(websocket_manager, _recognition_worker)
            _realtime_listener.start()
        except Exception as e:
            logger.error(f"Failed to attach realtime listeners: {e}", exc_info=True)
            _realtime_listener = None
    else:
        logger.warning("Realtime database not configured; live updates and auto-recognition are off")

    yield

    # Shutdown
    if _realtime_listener:
        _realtime_listener.stop()
        _realtime_listener = None

    if _recognition_worker:
        await _recognition_worker.stop()
        _recognition_worker = None

    if models_task and not models_task.done():
        models_task.cancel()

    await close_shared_http_client()
    logger.info("Application shutdown complete")


async def login_required_handler(request: Request, exc: LoginRequiredError) -> RedirectResponse:
    return RedirectResponse(exc.sign_in_url, status_code=status.HTTP_302_FOUND)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - API, page and static routes

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="MemoryLens",
        version="1.0.0",
        description="MemoryLens website, memories dashboard and face recognition",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(LoginRequiredError, login_required_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(memory_router, prefix="/api/v1/memories")
    application.include_router(status_router, prefix="/api/v1/status")
    application.include_router(face_router, prefix="/api/v1/faces")
    application.include_router(contact_router, prefix="/api/v1/contact")
    application.include_router(realtime_router, prefix="/api/v1/realtime")
    application.include_router(upload_router, prefix="/api")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "database": is_firebase_ready()}

    application.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    application.include_router(pages_router)

    return application


# Create application instance
app = create_application()
