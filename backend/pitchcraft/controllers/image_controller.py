from pitchcraft.core.ai_generators import (
    PLACEHOLDER_NOTE,
    PLACEHOLDER_PROMPT_CHARS,
    generate_images_for_prompts,
)
from pitchcraft.core.config import settings
from pitchcraft.core.deck_builder import placeholder_image_url
from pitchcraft.schemas.presentation import GenerateImagesResponse


async def generate_images(prompts: list[str]) -> GenerateImagesResponse:
    """Generate one image per prompt; unavailable images become placeholders."""
    if not settings.ai_generation_available:
        return GenerateImagesResponse(
            images=[placeholder_image_url(p[:PLACEHOLDER_PROMPT_CHARS]) for p in prompts],
            note=PLACEHOLDER_NOTE,
        )

    result = await generate_images_for_prompts(prompts)
    return GenerateImagesResponse(images=result.images, note=result.note)
