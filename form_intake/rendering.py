from __future__ import annotations
import os
from typing import Iterable, List, Sequence
from urllib.parse import quote

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import Submission

_env = Environment(
    loader=PackageLoader("form_intake", "templates"),
    autoescape=select_autoescape(["html"]),
)

def download_url(upload_url: str, file_path: str) -> str:
    return f"{upload_url.rstrip('/')}/{quote(os.path.basename(file_path))}"

def render_form_page(action_url: str, *, stylesheet_url: str | None = None,
                     message: str | None = None, errors: Sequence[str] = ()) -> str:
    return _env.get_template("form.html").render(
        title="Submit",
        action_url=action_url,
        stylesheet_url=stylesheet_url,
        message=message,
        errors=list(errors),
    )

def render_submissions_table(submissions: Iterable[Submission], upload_url: str, *,
                             stylesheet_url: str | None = None) -> str:
    rows: List[Submission] = list(submissions)
    return _env.get_template("admin.html").render(
        title="Form Submissions",
        submissions=rows,
        stylesheet_url=stylesheet_url,
        download_url=lambda path: download_url(upload_url, path),
    )

def render_denied_page() -> str:
    return _env.get_template("denied.html").render(title="Access denied", stylesheet_url=None)
