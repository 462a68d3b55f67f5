from functools import lru_cache

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from hpworld.config.app_config import data_file_path
from hpworld.models.errors import ValidationError
from hpworld.models.schema import FormData
from hpworld.services.google_form import GoogleFormForwarder
from hpworld.services.relay import RelayService
from hpworld.services.repository import UserEntryRepository
from hpworld.utils.logger import get_logger

logger = get_logger("api")

router = APIRouter()


@lru_cache
def get_relay_service() -> RelayService:
    # Starts from an empty collection each process, the file is a snapshot only
    return RelayService(UserEntryRepository(data_file_path()), GoogleFormForwarder())


def failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@router.post("/save")
async def save_user(payload: FormData, relay: RelayService = Depends(get_relay_service)):
    try:
        logger.info("Received submission for mobile %s", payload.mobile)
        await relay.accept(payload)
        return {"success": True}
    except ValidationError as e:
        logger.info("Rejected submission: %s", e.message)
        return failure(400, e.message)
    except Exception:
        logger.exception("API Error")
        return failure(500, "Internal server error")
