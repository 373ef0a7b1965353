from typing import Dict, Optional
from loguru import logger
from ..core.exceptions import NotFoundError, ServerError

DEMO_USER_ID = "1"
DEMO_USER_NAME = "User name"
# Asking for this id triggers a deliberate internal failure
FAILING_USER_ID = "error"


def _load_user(user_id: str) -> Optional[Dict[str, str]]:
    if user_id == FAILING_USER_ID:
        raise RuntimeError("Something went wrong")
    if user_id != DEMO_USER_ID:
        return None
    return {"id": user_id, "name": DEMO_USER_NAME}


def get_user(user_id: str) -> Dict[str, str]:
    """
    Look up the demo user

    Raises:
        NotFoundError: For any id other than the demo user's
        ServerError: For the failing id
    """
    try:
        user = _load_user(user_id)
    except Exception as e:
        logger.error(f"Error looking up user {user_id}: {e}")
        raise ServerError() from e

    if user is None:
        raise NotFoundError()
    return user
