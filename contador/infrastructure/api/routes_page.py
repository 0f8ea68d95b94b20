"""HTML page — fallback for every GET not matched by the API."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import HTMLResponse

from contador.adapters.rendering.page import render_page
from contador.application.use_cases.cleanup_legacy import CleanupLegacyKeysUseCase
from contador.application.use_cases.render_roster import RenderRosterUseCase
from contador.config import settings
from contador.infrastructure.api.dependencies import (
    get_cleanup_legacy_uc,
    get_render_roster_uc,
)

HTML_CONTENT_TYPE = "text/html;charset=UTF-8"

router = APIRouter(tags=["page"])


@router.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
async def page(
    full_path: str,
    background_tasks: BackgroundTasks,
    render_uc: RenderRosterUseCase = Depends(get_render_roster_uc),
    cleanup_uc: CleanupLegacyKeysUseCase = Depends(get_cleanup_legacy_uc),
) -> HTMLResponse:
    """Render the counters page, seeding the roster on first visit.

    Legacy key cleanup runs after the response has been sent; its outcome is
    never visible to the client.
    """
    view = await render_uc.execute()
    background_tasks.add_task(cleanup_uc.execute, view.people)

    body = render_page(view.people, title=settings.page_title, daily_limit=settings.daily_limit)
    return HTMLResponse(content=body, headers={"content-type": HTML_CONTENT_TYPE})
