"""
API Routes for outlines.

Endpoints
---------
- `POST /outline`: Parse a document and return its blocks and forest.
- `POST /search`: Return nodes whose title contains a query.
- `POST /highlight`: Resolve an offset range to the highlight message for its node.

Every request carries the full document; the service keeps no state between
calls, mirroring how the library rebuilds the outline on each change.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from logoutline.api.schemas import (
    HighlightRequest,
    OutlineRequest,
    OutlineResponse,
    SearchRequest,
    SearchResponse,
)
from logoutline.core.contracts.messages import HighlightMessage
from logoutline.outline.display import describe, describe_forest
from logoutline.outline.search import find_by_range, search_titles
from logoutline.pipelines.outline import OutlineContext, OutlineResult, run_outline

router = APIRouter(tags=["Outline"])


def _run(request: OutlineRequest) -> OutlineResult:
    return run_outline(
        OutlineContext(
            text=request.text, original=request.original, source_name=request.source_name
        )
    )


@router.post("/outline", response_model=OutlineResponse, summary="Build the outline of a log")
async def outline(request: OutlineRequest) -> OutlineResponse:
    result = _run(request)
    return OutlineResponse(
        blocks=result["blocks"],
        forest=describe_forest(result["forest"]),
        message=result["message"],
    )


@router.post("/search", response_model=SearchResponse, summary="Search jobs by title")
async def search(request: SearchRequest) -> SearchResponse:
    """Case-insensitive substring search; an empty match list is not an error."""
    if not request.query.strip():
        raise ValueError("query must not be blank")
    result = _run(request)
    matches = search_titles(result["forest"], request.query)
    return SearchResponse(matches=[describe(n, recursive=False) for n in matches])


@router.post("/highlight", response_model=HighlightMessage, summary="Highlight message for a range")
async def highlight(request: HighlightRequest) -> HighlightMessage:
    result = _run(request)
    node = find_by_range(result["forest"], request.start, request.end)
    if node is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No job block spans {request.start}-{request.end}",
        )
    return HighlightMessage.for_block(node.block)


__all__ = ["router"]
