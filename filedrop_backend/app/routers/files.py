from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from .. import storage
from ..core.config import Settings
from ..deps import get_settings
from ..errors import BadRequest, MethodNotAllowed

logger = logging.getLogger("filedrop.files")

router = APIRouter(tags=["files"])

# Both routes answer every verb; /upload rejects the non-POST ones itself.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/upload", methods=ALL_METHODS, response_class=PlainTextResponse)
async def upload_file(request: Request, settings: Settings = Depends(get_settings)):
    """
    Store the multipart part named ``file`` under its client filename.
    An existing file with the same name is overwritten.
    """
    if request.method != "POST":
        raise MethodNotAllowed("Invalid request method")

    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise BadRequest("request Content-Type isn't multipart/form-data")

    try:
        form = await request.form()
    except MultiPartException as e:
        raise BadRequest(e.message) from e
    except StarletteHTTPException as e:
        # starlette wraps multipart parse errors when running inside an app
        raise BadRequest(str(e.detail)) from e
    except ValueError as e:
        # python-multipart parse errors
        raise BadRequest(str(e)) from e

    try:
        parts = [p for p in form.getlist("file") if isinstance(p, UploadFile)]
        if not parts:
            raise BadRequest("http: no such file")
        upload = parts[0]
        filename = storage.resolve_filename(upload.filename or "")

        _, written = await run_in_threadpool(
            storage.save_stream, settings.STORAGE_DIR, filename, upload.file
        )
    finally:
        await form.close()

    logger.info("UPLOAD: name=%s size=%d bytes", filename, written)
    return PlainTextResponse(f"Upload successful: {filename}")


@router.api_route("/view", methods=ALL_METHODS)
def view_files(settings: Settings = Depends(get_settings)):
    names = storage.list_files(settings.STORAGE_DIR)
    return JSONResponse(names)
