from fastapi import Header

from src.platform.exception.exceptions import CustomBaseError


async def get_caller_id(x_user_id: str | None = Header(default=None)) -> int:
    """Caller identity as forwarded by the upstream auth gateway"""
    if not x_user_id or not x_user_id.isdigit():
        raise CustomBaseError('Missing or invalid X-User-Id header', 401)
    return int(x_user_id)
