"""Image compile route factory."""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from .common.errors import TwillImageError
from .common.schemas import CompileOverrides, ImageDescriptor
from .compiler import ResponsiveImageCompiler


class CompileRequest(BaseModel):
    """Request body for POST /images/compile."""

    descriptor: ImageDescriptor
    overrides: CompileOverrides = Field(default_factory=CompileOverrides)


def create_router(compiler: ResponsiveImageCompiler | None = None) -> APIRouter:
    """Create router with an injected compiler.

    Example:
        from fastapi import FastAPI
        from twill_image.routes import create_router

        app = FastAPI()
        app.include_router(create_router(), prefix="/api")
    """
    router = APIRouter()
    image_compiler = compiler if compiler is not None else ResponsiveImageCompiler()

    @router.post("/images/compile")
    async def compile_image(request: CompileRequest) -> dict[str, Any]:
        try:
            bundle = image_compiler.compile(request.descriptor, request.overrides)
        except TwillImageError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        return bundle.to_dict()

    _ = compile_image
    return router
