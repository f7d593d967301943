from fastapi import APIRouter

from pitchcraft.controllers import image_controller
from pitchcraft.schemas.presentation import GenerateImagesRequest, GenerateImagesResponse

router = APIRouter(prefix="/images", tags=["images"])


@router.post("", response_model=GenerateImagesResponse)
async def generate_images(payload: GenerateImagesRequest):
    """Generate one image per prompt, in prompt order."""
    return await image_controller.generate_images(payload.prompts)
