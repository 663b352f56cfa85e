"""Court endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db, is_unique_violation
from app.core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from app.models.court import Court
from app.schemas.common import APIResponse
from app.schemas.court import CourtCreate, CourtInDB

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("", response_model=APIResponse[List[CourtInDB]])
async def list_courts(
    name: Optional[str] = Query(default=None, description="Case-insensitive name filter"),
    db: AsyncSession = Depends(get_db),
):
    """
    List active courts.

    With a name filter, only active courts whose name contains the filter
    (case-insensitive) are returned, and an empty match is a 404.

    Args:
        name: Optional substring filter
        db: Database session

    Returns:
        Envelope with the list of courts
    """
    query = select(Court).where(Court.is_active.is_(True))
    if name:
        query = query.where(Court.name.ilike(f"%{name}%"))

    try:
        result = await db.execute(query)
        courts = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error querying courts: {e}")
        raise InternalError("Failed to fetch courts")

    if name and not courts:
        raise NotFoundError("Court not found")

    return APIResponse(
        message="Courts retrieved successfully",
        data=[CourtInDB.model_validate(c) for c in courts],
    )


@router.post("", response_model=APIResponse[CourtInDB], status_code=201)
async def create_court(
    court: CourtCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new court.

    Args:
        court: Court name and optional description
        db: Database session

    Returns:
        Envelope with the created court
    """
    if not court.name:
        raise ValidationError("Court name is required")

    db_court = Court(name=court.name, description=court.description, is_active=True)
    db.add(db_court)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if is_unique_violation(e):
            raise ConflictError("Court with this name already exists")
        logger.error(f"Error creating court: {e}")
        raise InternalError("Failed to create court")
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error creating court: {e}")
        raise InternalError("Failed to create court")

    await db.refresh(db_court)
    logger.info(f"Created court {db_court.name} ({db_court.id})")

    return APIResponse(
        message="Court created successfully",
        data=CourtInDB.model_validate(db_court),
    )
