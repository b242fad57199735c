"""Application entrypoint."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import httpx

from recipe_search.config import AppSettings, get_settings
from recipe_search.console.render import render_state
from recipe_search.console.stdin import StdinLineReader
from recipe_search.i18n import I18nService
from recipe_search.logging import configure_logging, logger
from recipe_search.presentation.state import ViewState
from recipe_search.session import open_session

QUIT_COMMAND = ":q"

LineReader = Callable[[str], Awaitable[str | None]]


async def run_console(
    settings: AppSettings,
    *,
    reader: LineReader | None = None,
    write: Callable[[str], None] = print,
    i18n: I18nService | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    reader = reader or StdinLineReader()
    i18n = i18n or I18nService()
    locale = settings.default_language

    def _render(state: ViewState) -> None:
        write(render_state(state, i18n, locale=locale))

    async with open_session(settings, transport=transport) as session:
        controller = session.controller
        _render(controller.state)
        controller.subscribe(_render)
        while True:
            line = await reader(i18n.gettext("search.prompt", locale=locale))
            if line is None or line.strip() == QUIT_COMMAND:
                break
            await controller.submit(line)
    write(i18n.gettext("search.goodbye", locale=locale))


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level_value(), json_logs=settings.environment != "dev")
    logger.info("recipe_search_starting", environment=settings.environment)
    await run_console(settings)


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print()
        print(I18nService().gettext("search.goodbye", locale=get_settings().default_language))


if __name__ == "__main__":
    run()
