"""Master module - dynamic route aggregator for FastAPI."""

from importlib.metadata import entry_points
from typing import Callable, cast

from fastapi import APIRouter
from loguru import logger

from .common.file_storage import FileStorage
from .common.settings import ProcessingSettings
from .registry import ProcessorRegistry, get_processor_registry

ROUTES_GROUP = "cl_image_tools.routes"

# Type alias for route factory functions loaded from entry points
RouteFactory = Callable[[FileStorage, ProcessorRegistry], APIRouter]


def create_master_router(
    file_storage: FileStorage,
    registry: ProcessorRegistry | None = None,
    settings: ProcessingSettings | None = None,
) -> APIRouter:
    """Aggregate all plugin routes from entry points.

    Discovers route factories from [project.entry-points."cl_image_tools.routes"]
    in pyproject.toml and mounts them on one router.

    Args:
        file_storage: FileStorage implementation for uploads and outputs
        registry: Processors to serve. If None, discovered from entry points.
        settings: Settings for discovered processors (ignored when a
                  registry is given)

    Returns:
        Combined APIRouter with all plugin routes

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)

    Example:
        from fastapi import FastAPI
        from cl_image_tools import LocalFileStorage, create_master_router

        app = FastAPI()
        app.include_router(
            create_master_router(LocalFileStorage("./scratch")),
            prefix="/api",
        )
    """
    if registry is None:
        registry = get_processor_registry(settings)

    master = APIRouter()

    for ep in entry_points(group=ROUTES_GROUP):
        try:
            create_router = cast(RouteFactory, ep.load())
            plugin_router = create_router(file_storage, registry)
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load routes '{ep.name}': {e}") from e
        master.include_router(plugin_router)
        logger.debug(f"Mounted routes from '{ep.name}'")

    return master


def get_available_route_plugins() -> list[str]:
    """Names of route plugins registered as entry points."""
    return [ep.name for ep in entry_points(group=ROUTES_GROUP)]
