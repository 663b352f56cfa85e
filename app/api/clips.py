"""Clip upload and listing endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from app.api.booking_hours import parse_id_filter
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import InternalError, ValidationError
from app.models.booking_hour import BookingHour
from app.models.clip import Clip
from app.schemas.clip import ClipInDB
from app.schemas.common import APIResponse
from app.services.camera_name import parse_camera_name
from app.services.clip_storage import (
    UploadTooLargeError,
    build_clip_filename,
    detect_mime_type,
    ensure_clips_dir,
    save_stream,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clips", tags=["clips"])

UPLOADED = "uploaded"

# Room for boundaries, part headers and the text fields on top of the file itself
MULTIPART_OVERHEAD = 64 * 1024

UPLOAD_FORM_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "required": ["video", "bookingHourId"],
                    "properties": {
                        "video": {"type": "string", "format": "binary"},
                        "bookingHourId": {"type": "integer"},
                        "description": {"type": "string"},
                        "camera_name": {"type": "string"},
                    },
                }
            }
        },
    }
}


async def read_upload_form(request: Request, max_size: int) -> FormData:
    """Parse the multipart body, rejecting requests declared far larger than a max_size file."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_size + MULTIPART_OVERHEAD:
        logger.info(f"Rejected upload of {content_length} bytes (limit {max_size})")
        raise ValidationError("Failed to parse form")

    try:
        return await request.form()
    except (MultiPartException, StarletteHTTPException) as e:
        logger.info(f"Failed to parse upload form: {e}")
        raise ValidationError("Failed to parse form")


def form_text(form: FormData, key: str) -> Optional[str]:
    value = form.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


@router.post("", response_model=APIResponse[ClipInDB], status_code=201, openapi_extra=UPLOAD_FORM_SCHEMA)
@router.post(
    "/upload",
    response_model=APIResponse[ClipInDB],
    status_code=201,
    include_in_schema=False,
    openapi_extra=UPLOAD_FORM_SCHEMA,
)
async def upload_clip(
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Upload a video clip for a booking hour.

    Multipart fields: video (file), bookingHourId, optional description and
    camera_name. The file is written before the row is inserted; if the
    insert fails the file stays on disk.

    Args:
        request: Incoming multipart request
        db: Database session
        settings: Upload directory and size cap

    Returns:
        Envelope with the stored clip metadata
    """
    form = await read_upload_form(request, settings.MAX_UPLOAD_SIZE)
    try:
        raw_id = form_text(form, "bookingHourId")
        if raw_id is None:
            raise ValidationError("Booking hour ID is required")
        try:
            booking_hour_id = int(raw_id)
        except ValueError:
            raise ValidationError("Invalid booking hour ID")

        try:
            result = await db.execute(select(BookingHour.id).where(BookingHour.id == booking_hour_id))
            booking_exists = result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking booking hour existence: {e}")
            raise InternalError("Failed to verify booking hour")

        if not booking_exists:
            raise ValidationError("Booking hour not found")

        video = form.get("video")
        if not isinstance(video, UploadFile):
            raise ValidationError("No video file provided")

        try:
            upload_dir = ensure_clips_dir(settings.UPLOAD_DIR)
        except OSError as e:
            logger.error(f"Error creating upload directory: {e}")
            raise InternalError("Failed to create upload directory")

        filename = build_clip_filename(booking_hour_id, video.filename)
        file_path = upload_dir / filename

        try:
            file_size = await run_in_threadpool(save_stream, video.file, file_path, settings.MAX_UPLOAD_SIZE)
        except UploadTooLargeError:
            raise ValidationError("Failed to parse form")
        except OSError as e:
            logger.error(f"Error saving file {file_path}: {e}")
            raise InternalError("Failed to save file")

        camera_name = form_text(form, "camera_name") or parse_camera_name(form_text(form, "description"))

        clip = Clip(
            booking_hour_id=booking_hour_id,
            filename=filename,
            file_path=str(file_path),
            file_size=file_size,
            mime_type=detect_mime_type(video.content_type, video.filename),
            camera_name=camera_name,
            upload_status=UPLOADED,
        )
        db.add(clip)
        try:
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error saving clip metadata, {file_path} left without a row: {e}")
            raise InternalError("Failed to save clip metadata")

        await db.refresh(clip)
        logger.info(f"Stored clip {clip.filename} ({file_size} bytes) for booking hour {booking_hour_id}")
    finally:
        await form.close()

    return APIResponse(
        message="Clip uploaded successfully",
        data=ClipInDB.model_validate(clip),
    )


@router.get("", response_model=APIResponse[List[ClipInDB]])
async def list_clips(
    booking_hour_id: Optional[str] = Query(
        default=None, alias="bookingHourId", description="Filter by booking hour ID"
    ),
    db: AsyncSession = Depends(get_db),
):
    """
    List clips, newest first.

    Args:
        booking_hour_id: Optional booking hour ID filter
        db: Database session

    Returns:
        Envelope with the list of clips (possibly empty)
    """
    booking_filter = parse_id_filter(booking_hour_id, "Invalid booking hour ID")

    query = select(Clip).order_by(Clip.created_at.desc())
    if booking_filter is not None:
        query = query.where(Clip.booking_hour_id == booking_filter)

    try:
        result = await db.execute(query)
        clips = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error querying clips: {e}")
        raise InternalError("Failed to fetch clips")

    return APIResponse(
        message="Clips retrieved successfully",
        data=[ClipInDB.model_validate(c) for c in clips],
    )
