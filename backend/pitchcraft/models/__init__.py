# Import all models so SQLModel.metadata registers them for Alembic autogenerate.
from pitchcraft.models.base import BaseUUIDModel  # noqa: F401
from pitchcraft.models.presentation import Presentation  # noqa: F401
