from fastapi import APIRouter, Path
from ...models.common import UserResponse, ErrorResponse
from ...services.user_service import get_user

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_user_by_id(
    user_id: str = Path(..., description="User ID", examples=["1"])
):
    """
    Returns user by id
    """
    return get_user(user_id)
