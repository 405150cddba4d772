# vendor_api/api/v1/operations.py
"""
The closed set of operations served by the vendor endpoint.

Each operation has an input schema, validated before its handler runs, and
a handler returning the success payload (without the ``status`` key).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Type

from pydantic import ValidationError as PydanticValidationError

from vendor_api.api.deps import Workflows
from vendor_api.core.exceptions import ValidationError
from vendor_api.schemas.base import NoInput, OperationInput
from vendor_api.schemas.store import StoreCreate
from vendor_api.schemas.user import PictureUpdate, UserLookup
from vendor_api.schemas.venue import VenueCreate
from vendor_api.services.attachments import Upload

Uploads = Dict[str, Optional[Upload]]


class Operation(str, Enum):
    GET_USER_INFO = "getUserInfo"
    UPDATE_USER_PFP = "updateUserPfp"
    GET_STORE_CATEGORIES = "getStoreCategories"
    CREATE_STORE = "createStore"
    GET_STORES = "getStores"
    CREATE_VENUE = "createVenue"
    GET_VENUES = "getVenues"


@dataclass(frozen=True)
class OperationHandler:
    schema: Type[OperationInput]
    run: Callable[[Workflows, Any, Uploads], dict]


def validate_input(schema: Type[OperationInput], data: Mapping[str, Any]) -> OperationInput:
    """Validate request fields, reporting one message per failing field."""
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        messages = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            message = schema.required_messages.get(field) or f"{field}: {error['msg']}"
            if message not in messages:
                messages.append(message)
        raise ValidationError(messages[0], errors=messages)


def _get_user_info(workflows: Workflows, params: UserLookup, uploads: Uploads) -> dict:
    return {"user": workflows.profile.get_user_info(params.user_id).model_dump()}


def _update_user_pfp(workflows: Workflows, params: PictureUpdate, uploads: Uploads) -> dict:
    reference = workflows.profile.update_picture(params.user_id, uploads.get("profile_picture"))
    return {"message": "Profile picture updated successfully", "pfp_path": reference}


def _get_store_categories(workflows: Workflows, params: NoInput, uploads: Uploads) -> dict:
    categories = workflows.stores.list_categories()
    return {"categories": [category.model_dump() for category in categories]}


def _create_store(workflows: Workflows, params: StoreCreate, uploads: Uploads) -> dict:
    return workflows.stores.create(params, uploads)


def _get_stores(workflows: Workflows, params: UserLookup, uploads: Uploads) -> dict:
    stores = workflows.stores.list(params.user_id)
    return {"stores": [store.model_dump() for store in stores]}


def _create_venue(workflows: Workflows, params: VenueCreate, uploads: Uploads) -> dict:
    return workflows.venues.create(params, uploads)


def _get_venues(workflows: Workflows, params: UserLookup, uploads: Uploads) -> dict:
    venues = workflows.venues.list(params.user_id)
    return {"venues": [venue.model_dump() for venue in venues]}


HANDLERS: Dict[Operation, OperationHandler] = {
    Operation.GET_USER_INFO: OperationHandler(UserLookup, _get_user_info),
    Operation.UPDATE_USER_PFP: OperationHandler(PictureUpdate, _update_user_pfp),
    Operation.GET_STORE_CATEGORIES: OperationHandler(NoInput, _get_store_categories),
    Operation.CREATE_STORE: OperationHandler(StoreCreate, _create_store),
    Operation.GET_STORES: OperationHandler(UserLookup, _get_stores),
    Operation.CREATE_VENUE: OperationHandler(VenueCreate, _create_venue),
    Operation.GET_VENUES: OperationHandler(UserLookup, _get_venues),
}


def dispatch(
    workflows: Workflows, operation: str, fields: Mapping[str, Any], uploads: Uploads
) -> dict:
    try:
        handler = HANDLERS[Operation(operation)]
    except ValueError:
        raise ValidationError("Invalid action.")

    params = validate_input(handler.schema, fields)
    return {"status": "success", **handler.run(workflows, params, uploads)}
