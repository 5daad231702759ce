from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Submission:
    id: int
    name: str
    email: str
    phone: str
    plate_thickness: str
    comment: str
    file_path: str   # '' when no file was stored
