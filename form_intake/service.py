"""Submission service: the three entry points behind the HTTP routes.

The service owns its store handle and settings and has no knowledge of the
web framework that calls it.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from sqlalchemy.engine import Engine

from .db import make_session_factory
from .exceptions import AccessDeniedError, MissingFieldsError, UploadError
from .logging import get_logger
from .models import Submission
from .rendering import render_form_page, render_submissions_table
from .repository import insert_submission, list_submissions
from .schemas import SubmissionForm
from .security import MANAGE_OPTIONS, Authorizer, Principal, require_capability
from .settings import Settings
from .uploads import UploadedFile, save_upload

SUBMIT_MARKER = "submit_form"
CONFIRMATION_MESSAGE = "Thank you for your submission!"

logger = get_logger("service")

class SubmissionService:
    def __init__(self, engine: Engine, settings: Settings, *,
                 authorize: Authorizer | None = None,
                 stylesheet_url: str | None = None) -> None:
        self.engine = engine
        self.settings = settings
        self.authorize = authorize or require_capability(MANAGE_OPTIONS)
        self.stylesheet_url = stylesheet_url
        self._sessions = make_session_factory(engine)

    def render_form(self, action_url: str, *, message: str | None = None,
                    errors: Sequence[str] = ()) -> str:
        return render_form_page(action_url, stylesheet_url=self.stylesheet_url,
                                message=message, errors=errors)

    def handle_submission(self, form: SubmissionForm,
                          upload: Optional[UploadedFile] = None) -> Submission:
        logger.info("submission_received", has_file=bool(upload and upload.filename))
        if self.settings.require_fields:
            missing = form.missing_fields()
            if missing:
                logger.info("submission_rejected", missing=missing)
                raise MissingFieldsError(missing)

        file_path = ""
        if upload is not None and upload.filename:
            try:
                file_path = save_upload(upload, self.settings.upload_dir, self.settings.upload_collision)
            except UploadError as e:
                # not fatal: the row is stored without a file reference
                logger.warning("upload_failed", error=str(e), **e.context)

        with self._sessions() as db:
            submission = insert_submission(db, form, file_path)
        logger.info("submission_stored", id=submission.id, file_path=file_path)
        return submission

    def list_submissions(self) -> List[Submission]:
        with self._sessions() as db:
            return list_submissions(db)

    def render_admin_listing(self, principal: Principal) -> str:
        if not self.authorize(principal):
            logger.warning("admin_listing_denied", principal=principal.name)
            raise AccessDeniedError(MANAGE_OPTIONS, principal.name)
        submissions = self.list_submissions()
        logger.info("admin_listing_rendered", count=len(submissions))
        return render_submissions_table(submissions, self.settings.upload_url,
                                        stylesheet_url=self.stylesheet_url)
