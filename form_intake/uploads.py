from __future__ import annotations
import os
import shutil
import tempfile
from dataclasses import dataclass
from typing import BinaryIO

from .exceptions import UploadError

@dataclass
class UploadedFile:
    filename: str
    stream: BinaryIO

def _free_name(upload_dir: str, filename: str) -> str:
    stem, ext = os.path.splitext(filename)
    candidate, n = filename, 0
    while os.path.exists(os.path.join(upload_dir, candidate)):
        n += 1
        candidate = f"{stem}-{n}{ext}"
    return candidate

def save_upload(upload: UploadedFile, upload_dir: str, collision: str = "overwrite") -> str:
    """Write the upload under its original base name and return the final path.

    With ``collision="overwrite"`` an existing file of the same name is replaced;
    with ``"rename"`` a numeric suffix is added until the name is free.
    """
    # some browsers send the full client path
    filename = os.path.basename((upload.filename or "").replace("\\", "/"))
    if filename in ("", ".", ".."):
        raise UploadError(upload.filename or "", "empty filename")
    if collision == "rename":
        filename = _free_name(upload_dir, filename)

    target = os.path.join(upload_dir, filename)
    tmp_path = None
    try:
        os.makedirs(upload_dir, exist_ok=True)
        # an existing file is only replaced once the new bytes are fully written
        with tempfile.NamedTemporaryFile(dir=upload_dir, prefix=".upload-", delete=False) as out:
            tmp_path = out.name
            shutil.copyfileobj(upload.stream, out)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise UploadError(filename, str(e)) from e
    return target
