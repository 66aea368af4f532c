"""FastAPI application exposing the browser operations under ``/api``.

Handlers are plain functions, so FastAPI runs them in its threadpool and the
blocking filesystem calls never stall the event loop.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request

from dirbrowser import __version__
from dirbrowser.api.errors import register_error_handlers
from dirbrowser.api.schemas import (
    ErrorResponse,
    FileContentResponse,
    FileEntryModel,
    FilesResponse,
    InitResponse,
    ParentResponse,
    SelectFolderRequest,
    SelectFolderResponse,
    SuccessResponse,
    WriteFileRequest,
)
from dirbrowser.browser import FileBrowser
from dirbrowser.file_system_tree.file_entry import FileEntry

router = APIRouter(prefix="/api", tags=["files"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid path"},
    404: {"model": ErrorResponse, "description": "Path not found"},
    413: {"model": ErrorResponse, "description": "File too large"},
    500: {"model": ErrorResponse, "description": "Filesystem failure"},
}


def get_browser(request: Request) -> FileBrowser:
    browser: FileBrowser = request.app.state.browser
    return browser


def to_models(entries: List[FileEntry]) -> List[FileEntryModel]:
    return [FileEntryModel.model_validate(entry.to_dict()) for entry in entries]


@router.get("/init", response_model=InitResponse)
def init(browser: FileBrowser = Depends(get_browser)) -> InitResponse:
    return InitResponse(**browser.info())


@router.get("/files", response_model=FilesResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def list_files(
    path: Optional[str] = Query(default=None, description="Directory to list. Defaults to the configured root."),
    browser: FileBrowser = Depends(get_browser),
) -> FilesResponse:
    listing = browser.list(path)
    return FilesResponse(files=to_models(listing.files), currentPath=listing.current_path, root=listing.root)


@router.get("/parent", response_model=ParentResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def parent(
    path: Optional[str] = Query(default=None, description="Directory whose parent to list."),
    browser: FileBrowser = Depends(get_browser),
) -> ParentResponse:
    listing = browser.navigate_to_parent(path)
    return ParentResponse(files=to_models(listing.files), currentPath=listing.current_path, isRoot=listing.is_root)


@router.get("/file", response_model=FileContentResponse, responses=ERROR_RESPONSES)
def read_file(
    path: Optional[str] = Query(default=None, description="File to read."),
    browser: FileBrowser = Depends(get_browser),
) -> FileContentResponse:
    result = browser.read_file(path)
    return FileContentResponse(content=result.content, path=result.path)


@router.post("/file", response_model=SuccessResponse, responses=ERROR_RESPONSES)
def write_file(body: WriteFileRequest, browser: FileBrowser = Depends(get_browser)) -> SuccessResponse:
    browser.write_file(body.path, body.content)
    return SuccessResponse(success=True)


@router.post(
    "/select-folder",
    response_model=SelectFolderResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def select_folder(body: SelectFolderRequest, browser: FileBrowser = Depends(get_browser)) -> SelectFolderResponse:
    listing = browser.select_folder(body.folderPath)
    return SelectFolderResponse(success=True, files=to_models(listing.files), currentPath=listing.current_path)


def create_app(browser: Optional[FileBrowser] = None) -> FastAPI:
    """Create the HTTP application.

    Args:
        browser: The FileBrowser serving requests. Defaults to one built from the
            default configuration.

    Returns:
        A FastAPI application with the ``/api`` routes and error handlers installed.
    """
    app = FastAPI(title="dirbrowser", version=__version__)
    app.state.browser = browser if browser is not None else FileBrowser()
    app.include_router(router)
    register_error_handlers(app)
    return app
