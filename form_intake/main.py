from __future__ import annotations
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.staticfiles import StaticFiles

from . import __version__
from .db import init_db, make_engine
from .exceptions import AccessDeniedError, MissingFieldsError
from .logging import configure_logging
from .rendering import render_denied_page
from .schemas import SubmissionForm
from .security import Principal, principal_from_token
from .service import CONFIRMATION_MESSAGE, SUBMIT_MARKER, SubmissionService
from .settings import Settings, get_settings
from .uploads import UploadedFile

STATIC_DIR = Path(__file__).parent / "static"
STYLESHEET_URL = "/assets/form-styles.css"

_bearer = HTTPBearer(auto_error=False)

def create_app(settings: Settings | None = None, service: SubmissionService | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    if service is None:
        engine = make_engine(settings)
        init_db(engine, settings)
        service = SubmissionService(engine, settings, stylesheet_url=STYLESHEET_URL)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        service.engine.dispose()

    app = FastAPI(title="Form Intake", version=__version__, lifespan=lifespan)
    app.state.service = service

    app.mount("/assets", StaticFiles(directory=STATIC_DIR), name="assets")
    if settings.upload_url.startswith("/"):
        app.mount(settings.upload_url.rstrip("/"),
                  StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    @app.exception_handler(MissingFieldsError)
    async def _missing_fields(request: Request, exc: MissingFieldsError):
        errors = [f"Please fill in: {', '.join(exc.fields)}"]
        return HTMLResponse(service.render_form(str(request.url), errors=errors), status_code=400)

    @app.exception_handler(AccessDeniedError)
    async def _access_denied(request: Request, exc: AccessDeniedError):
        return HTMLResponse(render_denied_page(), status_code=403)

    def current_principal(credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)) -> Principal:
        return principal_from_token(credentials.credentials if credentials else None, settings)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def show_form(request: Request):
        return service.render_form(str(request.url))

    @app.post("/", response_class=HTMLResponse)
    def submit_form(
        request: Request,
        marker: Optional[str] = Form(None, alias=SUBMIT_MARKER),
        name: Optional[str] = Form(None),
        email: Optional[str] = Form(None),
        phone: Optional[str] = Form(None),
        plate_thickness: Optional[str] = Form(None, alias="plateThickness"),
        comment: Optional[str] = Form(None),
        file: Optional[UploadFile] = File(None),
    ):
        action_url = str(request.url)
        # without the marker this is not a submission
        if marker is None:
            return service.render_form(action_url)

        form = SubmissionForm(
            name=name, email=email, phone=phone, plate_thickness=plate_thickness, comment=comment,
        )
        upload = UploadedFile(file.filename or "", file.file) if file is not None else None
        service.handle_submission(form, upload)
        return service.render_form(action_url, message=CONFIRMATION_MESSAGE)

    @app.get("/admin/submissions", response_class=HTMLResponse)
    def admin_submissions(principal: Principal = Depends(current_principal)):
        return service.render_admin_listing(principal)

    return app
