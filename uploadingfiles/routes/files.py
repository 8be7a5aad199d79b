"""Routes that upload, list and serve the stored files."""

from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..toolkit.file_storage import BaseFileStorageService
from ..toolkit.flash import flash, pop_flash

router = APIRouter(tags=["files"])

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")


def inline_content_disposition(filename: str) -> str:
    """Build a `Content-Disposition` value without a disposition type, letting the browser display the file.

    Plain names go in `filename="..."`. Anything that would need escaping or is not ASCII goes in the
    RFC 5987 `filename*` form, the same rule `FileResponse` applies.
    """
    quoted = quote(filename)
    if quoted != filename:
        return f"filename*=utf-8''{quoted}"
    return f'filename="{filename}"'


# Dependencies
def get_storage_service(request: Request) -> BaseFileStorageService:
    """Get the storage service the application was built with."""
    return request.app.state.storage_service


@router.get("/", response_class=HTMLResponse)
def list_uploaded_files(
    request: Request,
    storage_service: BaseFileStorageService = Depends(get_storage_service),
):
    """Show the upload form and every stored file with a download and a display link."""
    short_files = [str(path) for path in storage_service.load_all()]
    # `url_for` does not escape path parameters: `#`, `?` and `%` would break the links
    files = [str(request.url_for("serve_file", filename=quote(name, safe=""))) for name in short_files]
    display_files = [str(request.url_for("display_file", filename=quote(name, safe=""))) for name in short_files]

    return templates.TemplateResponse(
        request,
        "upload_form.html",
        {
            "message": pop_flash(request),
            "files": files,
            "display_files": display_files,
            "short_files": short_files,
        },
    )


@router.get("/files/{filename}")
def serve_file(
    filename: str,
    storage_service: BaseFileStorageService = Depends(get_storage_service),
) -> FileResponse:
    """Send the file as a download."""
    file = storage_service.load_as_resource(filename)

    return FileResponse(
        file.path,
        media_type=file.guess_media_type() or "application/octet-stream",
        filename=file.filename,
        content_disposition_type="attachment",
    )


@router.get("/get/{filename}")
def display_file(
    filename: str,
    storage_service: BaseFileStorageService = Depends(get_storage_service),
) -> FileResponse:
    """Send the file to be displayed by the browser."""
    file = storage_service.load_as_resource(filename)

    media_type = file.guess_media_type()
    if media_type is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Type of the file could not be determined",
        )

    return FileResponse(
        file.path,
        media_type=media_type,
        headers={
            "Content-Disposition": inline_content_disposition(file.filename),
            "Content-Length": str(file.content_length()),
        },
    )


@router.post("/")
def handle_file_upload(
    request: Request,
    file: UploadFile = File(...),
    storage_service: BaseFileStorageService = Depends(get_storage_service),
) -> RedirectResponse:
    """Store the uploaded file and go back to the listing."""
    storage_service.store(file.file, file.filename)
    flash(request, f"You successfully uploaded {file.filename}!")

    return RedirectResponse(request.url_for("list_uploaded_files"), status_code=status.HTTP_302_FOUND)
