"""Bootstrap and HTTP surface for the roster UI."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from puppybowl.client import PlayerApiClient
from puppybowl.commands import Back, Remove, ViewDetails
from puppybowl.config import RosterSettings
from puppybowl.controller import DetailView, RosterController
from puppybowl.forms import NewPlayerForm
from puppybowl.views import form_to_html, region_to_html, render_page


logger = logging.getLogger("uvicorn.error")


class RosterApp:
    """Wires the client, controller and form together."""

    def __init__(self, settings: RosterSettings | None = None, client: PlayerApiClient | None = None):
        self.settings = settings or RosterSettings.from_env()
        self._owns_client = client is None
        self.client = client or PlayerApiClient(self.settings)
        self.controller = RosterController(
            self.client,
            discard_stale_refreshes=self.settings.discard_stale_refreshes,
        )
        self.form = NewPlayerForm(self.controller, self.settings.title)
        self.started = False
        self._start_lock = asyncio.Lock()

    async def init(self) -> None:
        await self.controller.refresh()
        self.form.render()
        self.started = True
        logger.info("Roster UI ready with %s players from %s", len(self.controller.players), self.settings.base_url)

    async def ensure_started(self) -> None:
        if self.started:
            return
        async with self._start_lock:
            if not self.started:
                await self.init()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def page_html(self) -> str:
        return render_page(form_to_html(self.controller.form), region_to_html(self.controller.region.elements))

    def state_to_dict(self) -> dict[str, Any]:
        state = self.controller.state
        return {
            "view": "detail" if isinstance(state, DetailView) else "list",
            "player_id": state.player_id if isinstance(state, DetailView) else None,
            "player_ids": self.controller.region.player_ids,
            "render_count": self.controller.region.render_count,
        }


def create_app(settings: RosterSettings | None = None, client: PlayerApiClient | None = None) -> FastAPI:
    roster = RosterApp(settings, client)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        await roster.ensure_started()
        try:
            yield
        finally:
            await roster.aclose()

    app = FastAPI(title="puppybowl roster", lifespan=lifespan)
    app.state.roster = roster

    def _back_to_ui() -> RedirectResponse:
        return RedirectResponse(url="/ui", status_code=303)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/")
    async def index():
        return RedirectResponse(url="/ui")

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_index():
        await roster.ensure_started()
        return HTMLResponse(roster.page_html())

    @app.get("/ui/state")
    async def ui_state() -> dict[str, Any]:
        await roster.ensure_started()
        return roster.state_to_dict()

    @app.post("/ui/players")
    async def ui_create_player(
        name: str = Form(""),
        breed: str = Form(""),
        image_url: str = Form("", alias="imageUrl"),
        status: str = Form(""),
        team: str | None = Form(None),
    ):
        await roster.ensure_started()
        await roster.form.submit(
            {"name": name, "breed": breed, "imageUrl": image_url, "status": status, "team": team}
        )
        return _back_to_ui()

    @app.post("/ui/players/{player_id}/details")
    async def ui_player_details(player_id: int):
        await roster.ensure_started()
        await roster.controller.dispatch(ViewDetails(player_id))
        return _back_to_ui()

    @app.post("/ui/players/{player_id}/remove")
    async def ui_remove_player(player_id: int):
        await roster.ensure_started()
        await roster.controller.dispatch(Remove(player_id))
        return _back_to_ui()

    @app.post("/ui/back")
    async def ui_back():
        await roster.ensure_started()
        await roster.controller.dispatch(Back())
        return _back_to_ui()

    return app
