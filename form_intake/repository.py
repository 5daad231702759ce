from __future__ import annotations
from typing import List

from sqlalchemy import text
from sqlalchemy.orm import Session

from .models import Submission
from .schemas import SubmissionForm

def insert_submission(db: Session, form: SubmissionForm, file_path: str) -> Submission:
    result = db.execute(
        text("""INSERT INTO submissions (name, email, phone, plateThickness, comment, file_path)
                 VALUES (:name, :email, :phone, :plate_thickness, :comment, :file_path)"""),
        {
            "name": form.name,
            "email": form.email,
            "phone": form.phone,
            "plate_thickness": form.plate_thickness,
            "comment": form.comment,
            "file_path": file_path,
        },
    )
    db.commit()
    return Submission(
        id=result.lastrowid,
        name=form.name,
        email=form.email,
        phone=form.phone,
        plate_thickness=form.plate_thickness,
        comment=form.comment,
        file_path=file_path,
    )

def list_submissions(db: Session) -> List[Submission]:
    # no ORDER BY: rows come back in insertion order
    rows = db.execute(
        text("SELECT id, name, email, phone, plateThickness, comment, file_path FROM submissions")
    ).all()
    return [
        Submission(
            id=r[0],
            name=r[1] or "",
            email=r[2] or "",
            phone=r[3] or "",
            plate_thickness=r[4] or "",
            comment=r[5] or "",
            file_path=r[6] or "",
        )
        for r in rows
    ]
