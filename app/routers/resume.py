from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from typing import Union
from starlette.datastructures import UploadFile as StarletteUploadFile
import asyncio
import logging

from app.config import Settings
from app.dependencies import get_app_settings
from app.exceptions import UnsupportedFormatError
from app.models import ErrorResponse, ExtractedProfile
from app.parsers.extract_profile import extract_profile
from app.services.resume_parser import extract_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/parse-resume",
    response_model=ExtractedProfile,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def parse_resume_endpoint(
    file: Union[UploadFile, str, None] = File(None),
    settings: Settings = Depends(get_app_settings),
):
    """
    Upload a resume (PDF or DOCX) and get back the detected name, email,
    phone number and the full extracted text.
    """
    logger.info("Received request: /api/parse-resume")
    # A plain text field named "file" counts as no upload
    if not isinstance(file, StarletteUploadFile):
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        data = await file.read()
        text = await asyncio.to_thread(
            extract_text, data, file.filename or "", settings.upload_dir
        )
        profile = extract_profile(text)
    except UnsupportedFormatError:
        raise HTTPException(status_code=400, detail="Only PDF or DOCX allowed")
    except Exception:
        logger.exception("Resume parsing error for %r", file.filename)
        raise HTTPException(status_code=500, detail="Failed to parse resume")
    finally:
        await file.close()

    logger.info(
        "Extracted fields: name=%r email=%r phone=%r",
        profile.name,
        profile.email,
        profile.phone,
    )
    return profile
