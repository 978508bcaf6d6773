"""
HTML pages: marketing site, sign-in/up and the dashboard.

Forms post back to these routes and redirect with a notice (title,
description and level in the query string), the server-side counterpart of
toast messages.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from ...application.dto.contact_dto import ContactRequest, ContactResponse
from ...application.dto.face_dto import FaceRegistrationRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.contact.submit_contact import SubmitContactUseCase
from ...application.use_cases.face.delete_face import DeleteFaceUseCase
from ...application.use_cases.face.list_faces import ListFacesUseCase
from ...application.use_cases.face.register_face import RegisterFaceUseCase
from ...application.use_cases.memory.get_memory import GetMemoryUseCase
from ...application.use_cases.memory.list_memories import ListMemoriesUseCase
from ...application.use_cases.status.get_capture_status import GetCaptureStatusUseCase
from ...application.use_cases.status.set_capture_status import STATUS_UPDATE_FAILED
from ...application.use_cases.status.toggle_capture_status import ToggleCaptureStatusUseCase
from ...domain.constants import REQUIRED_FACE_IMAGES
from ...di.container import get_container
from ...utils.datetime_utils import format_dashboard_date
from ..v1.auth_controller import clear_session_cookie, set_session_cookie
from ..v1.face_controller import read_face_uploads
from .session import get_optional_page_user, require_page_user, safe_redirect_target, with_notice

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], include_in_schema=False)

EMPTY_MEMORIES_TEXT = "No memories captured yet. Click Start to begin capturing memories."


def _notice(request: Request) -> Optional[dict]:
    title = request.query_params.get("notice")
    if not title:
        return None
    return {
        "title": title,
        "description": request.query_params.get("description", ""),
        "level": request.query_params.get("level", "success"),
    }


def _validation_messages(error: ValidationError) -> List[str]:
    return [f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()]


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


# ---------------------------------------------------------------------------
# Public site
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request, user: Optional[UserResponse] = Depends(get_optional_page_user)):
    return templates.TemplateResponse(request, "home.html", {
        "user": user,
        "contact_sent": request.query_params.get("contact") == "sent",
        "contact": ContactResponse(),
        "contact_errors": [],
        "form": {},
    })


@router.post("/contact", response_class=HTMLResponse)
async def contact_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
):
    form = {"name": name, "email": email, "subject": subject, "message": message}
    try:
        contact_request = ContactRequest(**form)
    except ValidationError as e:
        return templates.TemplateResponse(request, "home.html", {
            "user": await get_optional_page_user(request),
            "contact_sent": False,
            "contact": ContactResponse(),
            "contact_errors": _validation_messages(e),
            "form": form,
        }, status_code=status.HTTP_400_BAD_REQUEST)

    await get_container().get(SubmitContactUseCase).execute(contact_request)
    return _redirect("/?contact=sent#contact")


# ---------------------------------------------------------------------------
# Sign in / sign up / sign out
# ---------------------------------------------------------------------------

@router.get("/sign-in", response_class=HTMLResponse)
async def sign_in_page(request: Request, redirect_url: str = ""):
    return templates.TemplateResponse(request, "sign_in.html", {
        "redirect_url": redirect_url, "error": None, "email": "", "notice": _notice(request),
    })


@router.post("/sign-in", response_class=HTMLResponse)
async def sign_in_submit(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    redirect_url: str = Form(""),
):
    container = get_container()
    try:
        token = await container.get(LoginUserUseCase).execute(
            UserLoginRequest(email=email, password=password)
        )
    except (ValidationError, ValueError, RuntimeError) as e:
        error = "Invalid email or password" if isinstance(e, (ValidationError, ValueError)) else str(e)
        return templates.TemplateResponse(request, "sign_in.html", {
            "redirect_url": redirect_url, "error": error, "email": email, "notice": None,
        }, status_code=status.HTTP_401_UNAUTHORIZED)

    response = _redirect(safe_redirect_target(request, redirect_url))
    set_session_cookie(response, token.access_token)
    return response


@router.get("/sign-up", response_class=HTMLResponse)
async def sign_up_page(request: Request):
    return templates.TemplateResponse(request, "sign_up.html", {"errors": [], "form": {}})


@router.post("/sign-up", response_class=HTMLResponse)
async def sign_up_submit(
    request: Request,
    full_name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
):
    form = {"full_name": full_name, "email": email}
    container = get_container()
    try:
        registration = UserRegistrationRequest(full_name=full_name, email=email, password=password)
        await container.get(RegisterUserUseCase).execute(registration)
        token = await container.get(LoginUserUseCase).execute(
            UserLoginRequest(email=email, password=password)
        )
    except ValidationError as e:
        errors = _validation_messages(e)
    except (ValueError, RuntimeError) as e:
        errors = [str(e)]
    else:
        response = _redirect("/app")
        set_session_cookie(response, token.access_token)
        return response

    return templates.TemplateResponse(request, "sign_up.html", {
        "errors": errors, "form": form,
    }, status_code=status.HTTP_400_BAD_REQUEST)


@router.api_route("/sign-out", methods=["GET", "POST"])
async def sign_out():
    response = _redirect("/")
    clear_session_cookie(response)
    return response


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

@router.get("/app", response_class=HTMLResponse)
async def dashboard_page(request: Request, user: UserResponse = Depends(require_page_user)):
    container = get_container()
    capture_status = None
    memories = []
    error = None
    try:
        capture_status = await container.get(GetCaptureStatusUseCase).execute()
        memories = await container.get(ListMemoriesUseCase).execute()
    except RuntimeError as e:
        logger.error("Error loading dashboard: %s", e)
        error = str(e)

    return templates.TemplateResponse(request, "dashboard.html", {
        "user": user,
        "current_date": format_dashboard_date(),
        "status": capture_status,
        "cards": [memory for memory in memories if memory.timestamp],
        "empty_text": EMPTY_MEMORIES_TEXT,
        "error": error,
        "notice": _notice(request),
    })


@router.post("/app/status/toggle")
async def dashboard_toggle_status(user: UserResponse = Depends(require_page_user)):
    try:
        result = await get_container().get(ToggleCaptureStatusUseCase).execute()
    except RuntimeError as e:
        description = str(e).replace(f"{STATUS_UPDATE_FAILED}: ", "", 1)
        return _redirect(with_notice("/app", STATUS_UPDATE_FAILED, description, level="error"))
    level = "success" if result.capturing else "info"
    return _redirect(with_notice("/app", result.title, result.description, level=level))


@router.get("/app/memories/{memory_id}")
async def dashboard_memory_details(memory_id: str, user: UserResponse = Depends(require_page_user)):
    try:
        detail = await get_container().get(GetMemoryUseCase).execute(memory_id)
    except ValueError as e:
        return _redirect(with_notice("/app", "Memory not found", str(e), level="error"))
    except RuntimeError as e:
        return _redirect(with_notice("/app", "Memory Details", str(e), level="error"))
    return _redirect(with_notice("/app", "Memory Details", detail.message, level="info"))


@router.get("/app/train-face", response_class=HTMLResponse)
async def train_face_page(request: Request, user: UserResponse = Depends(require_page_user)):
    faces = []
    error = None
    try:
        faces = await get_container().get(ListFacesUseCase).execute()
    except RuntimeError as e:
        logger.error("Error loading faces: %s", e)
        error = str(e)

    return templates.TemplateResponse(request, "train_face.html", {
        "user": user,
        "faces": faces,
        "error": error,
        "trained": request.query_params.get("trained") == "1",
        "required_images": REQUIRED_FACE_IMAGES,
        "notice": _notice(request),
    })


@router.post("/app/train-face")
async def train_face_submit(
    name: str = Form(""),
    image_0: Optional[UploadFile] = File(None),
    image_1: Optional[UploadFile] = File(None),
    image_2: Optional[UploadFile] = File(None),
    user: UserResponse = Depends(require_page_user),
):
    images = await read_face_uploads([image for image in (image_0, image_1, image_2) if image is not None])
    try:
        await get_container().get(RegisterFaceUseCase).execute(
            FaceRegistrationRequest(name=name, images=images)
        )
    except (ValueError, RuntimeError) as e:
        return _redirect(with_notice("/app/train-face", str(e), level="error"))
    return _redirect(with_notice("/app/train-face?trained=1", "Face data saved successfully"))


@router.post("/app/train-face/{face_id}/delete")
async def train_face_delete(face_id: str, user: UserResponse = Depends(require_page_user)):
    try:
        await get_container().get(DeleteFaceUseCase).execute(face_id)
    except (ValueError, RuntimeError) as e:
        logger.error("Error deleting face %s: %s", face_id, e)
        return _redirect(with_notice("/app/train-face", "Failed to delete face", level="error"))
    return _redirect(with_notice("/app/train-face", "Face deleted successfully"))
