"""Print the persisted studio board the way the copy button formats it."""

from __future__ import annotations

import asyncio

from apareri.config.settings import get_settings
from apareri.monitoring.logging import configure_logging
from apareri.services.share import BOARD_SUMMARY_LIMIT, board_share_text
from apareri.storage.board import BoardStore
from apareri.storage.factory import build_storage


async def _summary() -> str:
    settings = get_settings()
    storage = await build_storage(settings)
    board = BoardStore(storage, key=settings.board_storage_key, capacity=settings.board_capacity)
    await board.load()
    return board_share_text(board.summarize(BOARD_SUMMARY_LIMIT))


def main() -> None:
    configure_logging()
    print(asyncio.run(_summary()))


if __name__ == "__main__":
    main()
