"""
Note Store: Static Pages
========================

What:  GET / (plain greeting) and GET /UploadForm.html (HTML form that
       posts to /write). Neither touches note data.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, PlainTextResponse

from notestore.config import Settings
from notestore.dependencies import get_settings

router = APIRouter(tags=["Pages"])

GREETING = "Server is running!"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def index() -> PlainTextResponse:
    return PlainTextResponse(GREETING)


@router.get(
    "/UploadForm.html",
    response_class=FileResponse,
    responses={200: {"description": "HTML form for creating notes", "content": {"text/html": {}}}},
    summary="Serve the note upload form",
)
async def upload_form(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(path=str(settings.upload_form_path), media_type="text/html")
