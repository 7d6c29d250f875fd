"""Quadimg microservice -- FastAPI application.

Endpoints:
    POST /encode      -- Build a quadtree from a P1 image
    POST /transform   -- Rotate / invert a P1 image through its quadtree
    POST /stats       -- Structural metrics of a P1 image's quadtree
    POST /decode      -- Render a quadtree back to a P1 image
    GET  /health      -- Health check
"""

from __future__ import annotations

from typing import Any, Literal

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from .encoder import matrix_to_quadtree
from .metrics import tree_stats
from .pbm import format_pbm, parse_pbm
from .renderer import make_matrix, tree_to_matrix
from .transforms import QUARTER_TURNS, apply_transforms
from .tree import tree_from_dict, tree_to_dict

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

SERVICE_VERSION = "0.1.0"

# Upper bound on raster text accepted per request (4 MiB of characters)
MAX_PBM_CHARS = 4 * 1024 * 1024

app = FastAPI(
    title="quadimg",
    description="Quadtree encoder, transformer and renderer for binary P1 images",
    version=SERVICE_VERSION,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class RasterRequest(BaseModel):
    """Request body carrying a P1 image."""

    pbm: str = Field(
        ...,
        max_length=MAX_PBM_CHARS,
        description="Image in ASCII P1 format",
        examples=["P1\n2 2\n1 0\n0 1\n"],
    )


class TransformRequest(RasterRequest):
    """Request body for /transform."""

    operations: list[Literal["rotate_left", "rotate_right", "invert"]] = Field(
        default_factory=list,
        description="Transforms applied left to right",
        examples=[["invert", "rotate_left"]],
    )
    trailing_delimiter: bool = Field(
        default=False,
        description="Emit a space after the last value of every output row",
    )


class DecodeRequest(BaseModel):
    """Request body for /decode."""

    tree: dict[str, Any] = Field(
        ...,
        description="Quadtree as nested {color, children} objects",
    )
    width: int = Field(..., ge=1, le=4096, description="Output width in pixels")
    height: int = Field(..., ge=1, le=4096, description="Output height in pixels")
    trailing_delimiter: bool = Field(default=False)


class StatsResponse(BaseModel):
    """Structural metrics of a quadtree."""

    leaves: int
    nodes: int
    min_branch_length: int
    max_branch_length: int


class EncodeResponse(BaseModel):
    """Response body for /encode."""

    width: int
    height: int
    tree: dict[str, Any]
    stats: StatsResponse


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


def _stats_response(tree) -> StatsResponse:
    stats = tree_stats(tree)
    return StatsResponse(
        leaves=stats.leaves,
        nodes=stats.nodes,
        min_branch_length=stats.min_branch,
        max_branch_length=stats.max_branch,
    )


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post("/encode", response_model=EncodeResponse)
async def encode_endpoint(request: RasterRequest) -> EncodeResponse:
    """Build the quadtree of a P1 image."""
    try:
        grid = parse_pbm(request.pbm)
        tree = matrix_to_quadtree(grid)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return EncodeResponse(
        width=len(grid[0]),
        height=len(grid),
        tree=tree_to_dict(tree),
        stats=_stats_response(tree),
    )


@app.post(
    "/transform",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Transformed P1 image"},
        422: {"description": "Invalid input"},
    },
)
async def transform_endpoint(request: TransformRequest) -> PlainTextResponse:
    """Apply rotations / inversion to a P1 image and return the result."""
    try:
        grid = parse_pbm(request.pbm)
        tree = apply_transforms(matrix_to_quadtree(grid), request.operations)

        width, height = len(grid[0]), len(grid)
        quarter_turns = sum(1 for op in request.operations if op in QUARTER_TURNS)
        if quarter_turns % 2:
            width, height = height, width

        output = tree_to_matrix(make_matrix(width, height), tree)
        body = format_pbm(output, trailing_delimiter=request.trailing_delimiter)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("transform_failed", error=str(e), operations=request.operations)
        raise HTTPException(status_code=500, detail="Transform failed")

    return PlainTextResponse(content=body)


@app.post("/stats", response_model=StatsResponse)
async def stats_endpoint(request: RasterRequest) -> StatsResponse:
    """Structural metrics of a P1 image's quadtree."""
    try:
        tree = matrix_to_quadtree(parse_pbm(request.pbm))
        stats = _stats_response(tree)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("stats_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Stats failed")

    return stats


@app.post(
    "/decode",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Rendered P1 image"},
        422: {"description": "Invalid input"},
    },
)
async def decode_endpoint(request: DecodeRequest) -> PlainTextResponse:
    """Render a quadtree to a P1 image of the requested size."""
    try:
        tree = tree_from_dict(request.tree)
        grid = tree_to_matrix(make_matrix(request.width, request.height), tree)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("decode_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Decoding failed")

    return PlainTextResponse(
        content=format_pbm(grid, trailing_delimiter=request.trailing_delimiter)
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="quadimg",
        version=SERVICE_VERSION,
    )
