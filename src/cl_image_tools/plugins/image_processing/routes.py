"""Image processing route factory."""

from pathlib import Path
from typing import Annotated
from uuid import uuid4

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from loguru import logger
from PIL import Image
from starlette.background import BackgroundTask

from ...common.file_storage import FileStorage
from ...common.processor import UnsupportedImageError
from ...registry import ProcessorRegistry


def split_args(args: str) -> list[str | None]:
    """Split the verb-argument part of the URL; empty segments mean "absent"."""
    args = args.rstrip("/")
    if not args:
        return []
    return [segment or None for segment in args.split("/")]


def output_filename(filename: str, format: str | None) -> str:
    path = Path(filename)
    if not format:
        return path.name
    extension = "jpg" if format.lower() in ("jpg", "jpeg") else format.lower()
    return f"{path.stem}.{extension}"


def create_router(
    file_storage: FileStorage,
    registry: ProcessorRegistry,
) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        file_storage: Scratch storage for uploads and outputs
        registry: Processors served by this router, keyed by name

    Returns:
        APIRouter with the processor listing and processing endpoints
    """
    router = APIRouter()

    @router.get("/processors", response_model=list[str])
    async def list_processors() -> list[str]:
        return sorted(registry)

    @router.post("/processors/{name}/{args:path}")
    async def process_image(
        name: str,
        args: str,
        file: Annotated[UploadFile, File(description="Image file to process")],
        format: Annotated[str | None, Form(description="Target format")] = None,
        quality: Annotated[
            int | None, Form(ge=0, le=100, description="Output quality (0-100)")
        ] = None,
    ) -> FileResponse:
        """Process an uploaded image with the named processor.

        Path segments after the processor name are its positional
        arguments, e.g. /processors/fill/400/400/NorthWest.
        """
        processor = registry.get(name)
        if processor is None:
            raise HTTPException(status_code=404, detail=f"Unknown processor: {name}")

        if not file.filename:
            raise HTTPException(status_code=400, detail="Uploaded file has no filename")

        try:
            params = processor.parse_args(split_args(args), format=format, quality=quality)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        scope_id = str(uuid4())
        filename = Path(file.filename).name
        try:
            saved = await file_storage.save(scope_id, f"input/{filename}", file)
            input_path = file_storage.resolve_path(scope_id, saved.relative_path)
            output_path = file_storage.allocate_path(
                scope_id, f"output/{output_filename(filename, params.format)}"
            )
            output = await run_in_threadpool(processor.process, input_path, output_path, params)

        except UnsupportedImageError as exc:
            _ = file_storage.remove_scope(scope_id)
            raise HTTPException(status_code=415, detail=str(exc)) from exc

        except ValueError as exc:
            _ = file_storage.remove_scope(scope_id)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        except Exception:
            _ = file_storage.remove_scope(scope_id)
            logger.exception(f"Processor '{name}' failed")
            raise

        return FileResponse(
            output.output_path,
            media_type=Image.MIME.get(output.format, "application/octet-stream"),
            filename=Path(output.output_path).name,
            background=BackgroundTask(file_storage.remove_scope, scope_id),
        )

    _ = (list_processors, process_image)
    return router
