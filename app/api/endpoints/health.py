from fastapi import APIRouter
from ...models.common import HealthResponse

router = APIRouter()

HEALTHY_STATUS = "Server is up and running"


@router.get("", response_model=HealthResponse)
async def health_check():
    """
    Checking the server's health
    """
    return {"status": HEALTHY_STATUS}
