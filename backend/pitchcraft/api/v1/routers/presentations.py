import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from pitchcraft.api.deps import get_db
from pitchcraft.controllers import presentation_controller
from pitchcraft.core.extraction import parse_business_content
from pitchcraft.schemas.business import BusinessContent
from pitchcraft.schemas.presentation import (
    GeneratePresentationRequest,
    GeneratePresentationResponse,
    PresentationRead,
    PresentationSummary,
)

router = APIRouter(prefix="/presentations", tags=["presentations"])


@router.post("/extract", response_model=BusinessContent)
async def extract_business_content(payload: GeneratePresentationRequest):
    """Run extraction only and return what was found in the text."""
    return parse_business_content(payload.text)


@router.post(
    "",
    response_model=GeneratePresentationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_presentation(
    payload: GeneratePresentationRequest,
    db: AsyncSession = Depends(get_db),
):
    """Generate a slide deck from free-form business text and store it."""
    presentation = await presentation_controller.generate_presentation(payload.text, db)
    return GeneratePresentationResponse(
        presentation_id=presentation.id,
        company_name=presentation.company_name,
        generation_mode=presentation.generation_mode,
        presentation=presentation.slides,
        note=presentation.note,
    )


@router.get("", response_model=list[PresentationSummary])
async def list_presentations(
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """List stored presentations, newest first."""
    return await presentation_controller.list_presentations(db, limit=limit)


@router.get("/{presentation_id}", response_model=PresentationRead, response_model_exclude_none=True)
async def get_presentation(
    presentation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await presentation_controller.get_presentation(presentation_id, db)


@router.delete("/{presentation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_presentation(
    presentation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    await presentation_controller.delete_presentation(presentation_id, db)


@router.post(
    "/{presentation_id}/images",
    response_model=PresentationRead,
    response_model_exclude_none=True,
)
async def regenerate_presentation_images(
    presentation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Regenerate the artwork of a stored deck; slide text is left as is."""
    return await presentation_controller.regenerate_images(presentation_id, db)
