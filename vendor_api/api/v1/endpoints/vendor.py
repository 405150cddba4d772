# vendor_api/api/v1/endpoints/vendor.py
import logging

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from vendor_api.api.deps import Workflows, get_workflows
from vendor_api.api.v1.operations import dispatch
from vendor_api.services.attachments import Upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Vendor"])

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@router.api_route("/vendor", methods=["GET", "POST"])
async def vendor(request: Request, workflows: Workflows = Depends(get_workflows)):
    """
    Single entry point for every marketplace operation.

    The operation and its fields come from the query string or the form body
    (the form wins). Blank values count as missing.
    """
    fields = dict(request.query_params)
    uploads = {}
    form = None

    try:
        if request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            for key, value in form.multi_items():
                if isinstance(value, UploadFile):
                    uploads[key] = Upload.from_form_value(value)
                else:
                    fields[key] = value

        fields = {key: value for key, value in fields.items() if value != ""}
        operation = fields.pop("operation", "")
        logger.debug(f"Dispatching operation {operation!r}")

        return await run_in_threadpool(dispatch, workflows, operation, fields, uploads)
    finally:
        # Spooled upload files are released once the operation is done.
        if form is not None:
            await form.close()
