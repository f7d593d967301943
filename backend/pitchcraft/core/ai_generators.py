"""
Generative collaborators for PitchCraft.

Agents / clients
----------------
- **presentation_agent** – structured slide content for a whole deck
- **OpenAI images**      – one illustration per slide (or per prompt)

Every call here can fail (quota, network, malformed model output).  Callers in
``pitchcraft.controllers`` catch those failures and fall back to the offline
deck from ``pitchcraft.core.deck_builder``.  Image batches never fail as a
whole: a slide whose request fails or times out gets a placeholder.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache

from openai import AsyncOpenAI
from pydantic_ai import Agent

from pitchcraft.core.config import settings
from pitchcraft.core.deck_builder import placeholder_image_url
from pitchcraft.schemas.business import BusinessContent
from pitchcraft.schemas.presentation import PresentationContent, SlideRecord

logger = logging.getLogger(__name__)

PLACEHOLDER_NOTE = (
    "Using placeholder images. Image generation will work when API quota is available."
)
PLACEHOLDER_PROMPT_CHARS = 50


# ---------------------------------------------------------------------------
# 1.  Presentation agent  (structured JSON for every slide)
# ---------------------------------------------------------------------------

_PRESENTATION_SYSTEM_PROMPT = """\
You are a world-class venture pitch strategist.  Given business information \
extracted from a founder's notes, produce a professional investor presentation \
as structured JSON.

## Guidelines

1. Use ONLY the information provided.  Never invent company facts.
2. Use the exact company name you are given throughout.
3. Create 12-15 slides, with sequential integer ids starting at 0.
4. Include a specific ``imagePrompt`` on EVERY slide.
5. For charts, use the extracted numbers to build realistic progressions \
(quarterly growth, yearly projections).  Every data point needs ``name`` and \
``value``.
6. Metric icons must be one of: TrendingUp, Users, Shield, Globe, Rocket, \
DollarSign, Target, Zap.

## Slide order

1. intro (PitchCraft branding)
2. title (company name)
3. problem / opportunity (if problem data exists)
4. solution / product (if solution data exists)
5. market (if market data exists)
6. business model (if business model data exists)
7. traction / growth (if traction data exists, with a chart from real numbers)
8. competition (if competition data exists)
9. team (featuring the named personnel)
10. financial projections (chart based on the extracted numbers)
11. funding ask (if funding data exists)
12. thank you
"""

# Model is resolved per run from ``settings.PRESENTATION_MODEL``.
presentation_agent = Agent(
    output_type=PresentationContent,
    system_prompt=_PRESENTATION_SYSTEM_PROMPT,
    retries=settings.PRESENTATION_MODEL_RETRIES,
)


def _normalize_slide_ids(slides: list[SlideRecord]) -> list[SlideRecord]:
    """Renumber slides positionally when the model returned duplicate ids."""
    if len({s.id for s in slides}) == len(slides):
        return slides
    logger.info("Presentation agent returned duplicate slide ids; renumbering")
    return [s.model_copy(update={"id": i}) for i, s in enumerate(slides)]


async def generate_presentation_slides(content: BusinessContent) -> list[SlideRecord]:
    """Use the *presentation_agent* to write slide content for *content*.

    Raises whatever the agent raises; an empty deck is treated as a failure.
    """
    company = content.company_name
    personnel = ", ".join(p.name for p in content.profile.personnel)
    prompt = (
        f"Create a professional VC presentation for {company}.\n\n"
        f"{content.to_prompt_context()}\n\n"
        f"Company name is \"{company}\" - use this exact name throughout.  "
        f"Feature the actual personnel on the team slide: {personnel or 'none listed'}."
    )
    result = await presentation_agent.run(prompt, model=settings.PRESENTATION_MODEL)
    slides = result.output.slides
    if not slides:
        raise ValueError("Presentation agent returned no slides")
    return _normalize_slide_ids(slides)


# ---------------------------------------------------------------------------
# 2.  Image generation
# ---------------------------------------------------------------------------

@dataclass
class ImageBatchResult:
    images: list[str]
    generated: int
    note: str | None = None

    @property
    def all_failed(self) -> bool:
        return self.generated == 0


@lru_cache
def get_openai_client() -> AsyncOpenAI:
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY or None)


def _image_prompt(prompt: str) -> str:
    return (
        f"Professional business presentation image: {prompt}. Clean, modern, "
        "corporate style with high quality and professional lighting. Suitable "
        "for investor presentation. No text overlays."
    )


async def generate_image(prompt: str) -> str:
    """Generate one image for *prompt* and return its URL.

    The request is bounded by ``IMAGE_TIMEOUT_SECONDS``; a timeout raises
    ``asyncio.TimeoutError`` like any other failure.
    """
    client = get_openai_client()
    response = await asyncio.wait_for(
        client.images.generate(
            model=settings.IMAGE_MODEL,
            prompt=_image_prompt(prompt),
            size=settings.IMAGE_SIZE,
            quality=settings.IMAGE_QUALITY,
            n=1,
        ),
        timeout=settings.IMAGE_TIMEOUT_SECONDS,
    )
    url = response.data[0].url if response.data else None
    if not url:
        raise ValueError("Image API returned no URL")
    return url


async def _try_generate_image(key, prompt: str) -> tuple[object, str | None]:
    try:
        return key, await generate_image(prompt)
    except Exception:
        logger.warning("Image generation failed for %s", key, exc_info=True)
        return key, None


async def generate_slide_images(
    slides: list[SlideRecord],
    company_name: str,
) -> ImageBatchResult:
    """Generate an image for every slide concurrently and patch ``image_url`` in place.

    Results are matched back to slides by id, not by completion order.  A
    slide whose request failed gets a placeholder named after its title.

    Parameters
    ----------
    slides:
        The deck to illustrate.  Each slide's ``image_prompt`` is used when
        present, otherwise a prompt is derived from its title.
    company_name:
        Used in derived prompts.
    """
    results = await asyncio.gather(*[
        _try_generate_image(
            slide.id,
            slide.image_prompt
            or f"Professional business presentation slide for {company_name}: {slide.title}",
        )
        for slide in slides
    ])
    urls_by_id = dict(results)

    generated = 0
    for slide in slides:
        url = urls_by_id.get(slide.id)
        if url:
            slide.image_url = url
            generated += 1
        else:
            slide.image_url = placeholder_image_url(slide.title)

    logger.info("Generated %d of %d slide images", generated, len(slides))
    return ImageBatchResult(
        images=[s.image_url for s in slides],
        generated=generated,
        note=PLACEHOLDER_NOTE if slides and generated == 0 else None,
    )


async def generate_images_for_prompts(prompts: list[str]) -> ImageBatchResult:
    """Generate one image per prompt, keeping the prompt order.

    A single failure becomes ``Image N``; when nothing succeeds every image is
    a placeholder labelled with the start of its prompt and a note is attached.
    """
    results = await asyncio.gather(*[
        _try_generate_image(index, prompt) for index, prompt in enumerate(prompts)
    ])
    urls_by_index = dict(results)
    generated = sum(1 for url in urls_by_index.values() if url)
    logger.info("Generated %d of %d images", generated, len(prompts))

    if generated == 0:
        return ImageBatchResult(
            images=[placeholder_image_url(p[:PLACEHOLDER_PROMPT_CHARS]) for p in prompts],
            generated=0,
            note=PLACEHOLDER_NOTE,
        )

    return ImageBatchResult(
        images=[
            urls_by_index.get(i) or placeholder_image_url(f"Image {i + 1}")
            for i in range(len(prompts))
        ],
        generated=generated,
    )
