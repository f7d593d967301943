"""
Presentation controller: text in, stored slide deck out.

Generation degrades through three tiers and never fails for well-formed text:

1. presentation agent content + generated images
2. presentation agent content + placeholder images (image service down)
3. offline structured deck from ``build_structured_deck`` (agent down)
"""

import logging
import uuid

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm.attributes import flag_modified
from sqlmodel.ext.asyncio.session import AsyncSession

from pitchcraft.core.ai_generators import (
    generate_presentation_slides,
    generate_slide_images,
)
from pitchcraft.core.config import settings
from pitchcraft.core.deck_builder import build_structured_deck
from pitchcraft.core.extraction import parse_business_content
from pitchcraft.models.presentation import Presentation
from pitchcraft.schemas.business import BusinessContent
from pitchcraft.schemas.presentation import SlideRecord

logger = logging.getLogger(__name__)

MODE_AI = "ai"
MODE_STRUCTURED = "structured"

STRUCTURED_NOTE = (
    "AI generation is unavailable; this presentation was built directly from "
    "the extracted business content."
)


# ---------------------------------------------------------------------------
# 1.  Deck generation
# ---------------------------------------------------------------------------

async def build_slides(content: BusinessContent) -> tuple[list[SlideRecord], str, str | None]:
    """Return ``(slides, generation_mode, note)`` for *content*.

    Any failure of the presentation agent drops to the structured deck.
    """
    if not settings.ai_generation_available:
        logger.info("AI generation disabled or unconfigured; building structured deck")
        return build_structured_deck(content), MODE_STRUCTURED, STRUCTURED_NOTE

    try:
        slides = await generate_presentation_slides(content)
    except Exception:
        logger.warning(
            "Presentation agent unavailable for %r; building structured deck",
            content.company_name,
            exc_info=True,
        )
        return build_structured_deck(content), MODE_STRUCTURED, STRUCTURED_NOTE

    logger.info("Presentation agent produced %d slides", len(slides))
    images = await generate_slide_images(slides, content.company_name)
    return slides, MODE_AI, images.note


async def generate_presentation(text: str, db: AsyncSession) -> Presentation:
    """Extract business content from *text*, build a deck, and store it."""
    content = parse_business_content(text)
    slides, mode, note = await build_slides(content)

    presentation = Presentation(
        company_name=content.company_name,
        source_text=text,
        generation_mode=mode,
        note=note,
        slides=[s.to_wire() for s in slides],
    )
    db.add(presentation)
    await db.flush()
    await db.refresh(presentation)
    return presentation


# ---------------------------------------------------------------------------
# 2.  Stored presentations
# ---------------------------------------------------------------------------

async def get_presentation(presentation_id: uuid.UUID, db: AsyncSession) -> Presentation:
    presentation = await db.get(Presentation, presentation_id)
    if not presentation:
        raise HTTPException(status_code=404, detail="Presentation not found")
    return presentation


async def list_presentations(db: AsyncSession, limit: int = 20) -> list[Presentation]:
    result = await db.execute(
        select(Presentation).order_by(Presentation.created_at.desc()).limit(limit)
    )
    return list(result.scalars().all())


async def delete_presentation(presentation_id: uuid.UUID, db: AsyncSession) -> None:
    presentation = await get_presentation(presentation_id, db)
    await db.delete(presentation)
    await db.flush()


async def regenerate_images(presentation_id: uuid.UUID, db: AsyncSession) -> Presentation:
    """Regenerate every slide image of a stored deck, patching ``imageUrl`` in place.

    Only image URLs change; slide ids, order, and text are untouched.
    """
    presentation = await get_presentation(presentation_id, db)
    slides = [SlideRecord.model_validate(s) for s in presentation.slides or []]

    # Intro slides carry no artwork.
    illustrated = [s for s in slides if s.image_prompt]
    images = await generate_slide_images(illustrated, presentation.company_name)
    urls_by_id = {s.id: s.image_url for s in illustrated}

    # Build a NEW list: SQLAlchemy JSON columns don't track in-place mutation.
    updated = []
    for raw in presentation.slides or []:
        slide = dict(raw)
        if slide.get("id") in urls_by_id:
            slide["imageUrl"] = urls_by_id[slide["id"]]
        updated.append(slide)

    presentation.slides = updated
    if presentation.generation_mode == MODE_STRUCTURED:
        presentation.note = images.note or STRUCTURED_NOTE
    else:
        presentation.note = images.note
    flag_modified(presentation, "slides")
    db.add(presentation)
    await db.flush()
    await db.refresh(presentation)
    return presentation
