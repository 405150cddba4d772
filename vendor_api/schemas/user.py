# vendor_api/schemas/user.py
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, PositiveInt

from vendor_api.schemas.base import OperationInput


class UserLookup(OperationInput):
    user_id: PositiveInt

    required_messages: ClassVar[Dict[str, str]] = {"user_id": "User ID is required."}


class PictureUpdate(OperationInput):
    user_id: PositiveInt

    required_messages: ClassVar[Dict[str, str]] = {
        "user_id": "User ID and profile picture are required."
    }


class UserInfo(BaseModel):
    user_id: int
    user_firstName: Optional[str] = None
    user_lastName: Optional[str] = None
    user_email: Optional[str] = None
    user_role: Optional[str] = None
    user_pfp: Optional[str] = None
