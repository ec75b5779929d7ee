"""Counter endpoints — single get/increment and batch lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from viewcounter.application.use_cases.batch_views import BatchViewsUseCase
from viewcounter.application.use_cases.count_view import CountViewUseCase
from viewcounter.domain.errors import MalformedBatchError
from viewcounter.infrastructure.api.dependencies import (
    get_batch_views_uc,
    get_count_view_uc,
    get_tenant_host,
)

router = APIRouter(tags=["counters"])

# Unsupported verbs are routed too so they get the JSON 405 from the use case
# instead of the framework's default body.
SINGLE_COUNTER_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.post("/batch")
async def batch_views(
    request: Request,
    host: str = Depends(get_tenant_host),
    batch_uc: BatchViewsUseCase = Depends(get_batch_views_uc),
):
    """Return views for a JSON array of paths; failed lookups map to null."""
    try:
        body = await request.json()
    except ValueError as e:
        raise MalformedBatchError(f"body is not valid JSON ({e})") from e
    return await batch_uc.execute(host, body)


@router.api_route("/{path:path}", methods=SINGLE_COUNTER_METHODS)
async def count_view(
    path: str,
    request: Request,
    host: str = Depends(get_tenant_host),
    count_uc: CountViewUseCase = Depends(get_count_view_uc),
):
    """GET returns the current count, POST increments it first."""
    # The matched path comes from the decoded request target; request.url is
    # rebuilt from the Host header and would split an encoded "?" or "#".
    result = await count_uc.execute(request.method, host, f"/{path}")
    return {"views": result.views}
