# routes/assessments.py
from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional
import logging

from errors import StoreError, ValidationError
from database import STORE_ERRORS, serialize
from models.assessment import AssessmentOwner
from storage import AssessmentStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assessments"])


@router.post("/upload-assessment")
async def upload_assessment(
    username: str = Form(...),
    UID: str = Form(...),
    day: int = Form(...),
    file: Optional[UploadFile] = File(None),
    storage: AssessmentStorage = Depends(get_storage),
):
    if file is None:
        raise ValidationError("No file uploaded")

    owner = AssessmentOwner(username=username, UID=UID, day=day)
    try:
        assessment_id = await storage.save(owner, file)
    except STORE_ERRORS + (OSError,) as e:
        raise StoreError(f"Error submitting assessment: {str(e)}")
    return {"message": "Assessment submitted successfully!", "id": assessment_id}


@router.get("/api/assessments")
async def list_assessments(storage: AssessmentStorage = Depends(get_storage)):
    try:
        assessments = await storage.list()
    except STORE_ERRORS as e:
        raise StoreError(f"Error fetching assessments: {str(e)}")
    return serialize(assessments)


@router.get("/assessment/{assessment_id}")
@router.get("/api/assessments/{assessment_id}")
async def get_assessment(assessment_id: str, storage: AssessmentStorage = Depends(get_storage)):
    try:
        return await storage.open(assessment_id)
    except STORE_ERRORS as e:
        raise StoreError(f"Error retrieving file: {str(e)}")
