"""Application entrypoint: logging setup and the pet session factory."""

from typing import Optional

from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.core.pet.pet import Pet
from src.services.pet_service import PetService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def create_pet_service(name: Optional[str] = None) -> PetService:
    """설정값으로 펫 세션 생성 (화면 계층 진입점)"""
    service = PetService(pet=Pet.create(settings.PET_DEFAULT_NAME if name is None else name))
    logger.info(
        "Pet session started: %s (seed=%s)",
        service.pet.name,
        settings.MYSTERY_BOX_SEED,
    )
    return service
