"""High-level studio logic tying calculators, board and feedback together."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from apareri.calculators.capsule import CapsuleConfig, CapsuleEngine, CapsuleResult
from apareri.calculators.multiwear import (
    Category,
    CategoryToggleRejected,
    MultiwearEngine,
    MultiwearResult,
)
from apareri.feedback.celebrate import CelebrationSink, Celebrator
from apareri.feedback.throttle import DEFAULT_COOLDOWN, FeedbackThrottle
from apareri.services.notices import Clipboard, ClipboardError, Notice, NotificationSink
from apareri.services.share import (
    BOARD_SUMMARY_LIMIT,
    board_card,
    board_share_text,
    capsule_share_text,
    multiwear_share_text,
)
from apareri.storage.board import (
    Accent,
    BoardEntry,
    BoardState,
    BoardStore,
    LookLength,
    LookMode,
    SlitDepth,
)

logger = logging.getLogger(__name__)

CARD_FALLBACK_TITLE = "Look"

COPY_FAILED = Notice("Copy failed", "Your browser blocked clipboard access.")
BOARD_CLEARED = Notice("Cleared", "Your board was cleared.")
RANDOMIZED = Notice("Randomized", "A new look suggestion is ready. Pin it if you like it.")


@dataclass(frozen=True, slots=True)
class LookSuggestion:
    """Randomly drawn look options, not yet pinned."""

    mode: LookMode
    length: LookLength
    slit: SlitDepth
    accent: Accent


class StudioService:
    """Encapsulates the capsule and multiwear calculators and the studio board."""

    def __init__(
        self,
        board: BoardStore,
        notifier: NotificationSink,
        celebrations: CelebrationSink,
        clipboard: Clipboard,
        *,
        cooldown: float = DEFAULT_COOLDOWN,
        reduced_motion: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.board = board
        self.capsule = CapsuleEngine()
        self.multiwear = MultiwearEngine()
        self._notifier = notifier
        self._celebrations = celebrations
        self._clipboard = clipboard
        self._cooldown = cooldown
        self._reduced_motion = reduced_motion
        self._rng = rng or random.Random()
        self._celebrators = {
            anchor: self._celebrator(anchor) for anchor in ("capsule", "multiwear", "board")
        }
        self._capsule_config = CapsuleConfig()

    def _celebrator(self, anchor: str) -> Celebrator:
        return Celebrator(
            anchor,
            self._celebrations,
            reduced_motion=self._reduced_motion,
            throttle=FeedbackThrottle(self._cooldown),
            rng=self._rng,
        )

    def _celebrate(self, anchor: str, anchor_text: str, *, throttled: bool = True) -> None:
        celebrator = self._celebrators[anchor]
        celebrator.anchor_text = anchor_text
        celebrator.celebrate(throttled=throttled)

    async def start(self) -> None:
        """Initial render: default calculator values and the persisted board."""

        self.capsule.evaluate(self._capsule_config, user_driven=False)
        self.multiwear.current()
        entries = await self.board.load()
        logger.info("Studio ready with %s pinned looks.", len(entries))

    # capsule

    def capsule_result(self) -> CapsuleResult:
        return self.capsule.last_result or self.capsule.evaluate(self._capsule_config, user_driven=False)

    def update_capsule(self, **raw: Any) -> CapsuleResult:
        """Clamp raw form values, recompute and celebrate once the user has interacted."""

        self._capsule_config = CapsuleConfig.from_raw(**raw)
        result = self.capsule.evaluate(self._capsule_config)
        if self.capsule.touched:
            self._celebrate("capsule", f"{result.combos:,}")
        return result

    async def copy_capsule(self) -> bool:
        result = self.capsule_result()
        return await self._copy(
            capsule_share_text(result),
            Notice("Copied", "Your capsule score was copied to clipboard."),
            anchor="capsule",
            anchor_text=f"{result.combos:,}",
            throttled=False,
        )

    # multiwear

    def _after_multiwear_change(self) -> MultiwearResult:
        result = self.multiwear.current()
        if self.multiwear.touched:
            self._celebrate("multiwear", f"{result.total_ways:,}")
        return result

    def multiwear_result(self) -> MultiwearResult:
        return self.multiwear.current()

    def toggle_category(self, category: Category | str) -> bool:
        """Flip a category; refusing to disable the last one is reported as a notice."""

        try:
            self.multiwear.toggle(category)
        except CategoryToggleRejected as exc:
            logger.info("Rejected disabling the last multiwear category %s", exc.category.value)
            self._notifier.notify(Notice(exc.title, exc.body))
            return False
        self._after_multiwear_change()
        return True

    def configure_multiwear(
        self,
        *,
        product_key: str | None = None,
        slit_setting: Any = None,
        goal: Any = None,
    ) -> MultiwearResult:
        if product_key is not None:
            self.multiwear.select_product(product_key)
        if slit_setting is not None:
            self.multiwear.set_slit(slit_setting)
        if goal is not None:
            self.multiwear.set_goal(goal)
        return self._after_multiwear_change()

    async def copy_multiwear(self) -> bool:
        result = self.multiwear.current()
        return await self._copy(
            multiwear_share_text(result),
            Notice("Copied", "Your silhouette breakdown was copied to clipboard."),
            anchor="multiwear",
            anchor_text=f"{result.total_ways:,}",
            throttled=False,
        )

    # board

    def _board_count_text(self) -> str:
        return f"{len(self.board)} pinned"

    async def pin(self, entry: BoardEntry) -> BoardState:
        entries = await self.board.pin(entry)
        self._celebrate("board", self._board_count_text())
        return entries

    async def remove(self, position: int) -> BoardState:
        return await self.board.remove(position)

    async def clear(self) -> BoardState:
        entries = await self.board.clear()
        self._notifier.notify(BOARD_CLEARED)
        return entries

    def board_cards(self) -> list[dict[str, str]]:
        return [
            board_card(self.board.title_for(entry, CARD_FALLBACK_TITLE), entry)
            for entry in self.board.entries
        ]

    def board_text(self) -> str:
        return board_share_text(self.board.summarize(BOARD_SUMMARY_LIMIT))

    async def copy_board(self) -> bool:
        return await self._copy(
            self.board_text(),
            Notice("Copied", "Your board summary was copied to clipboard."),
            anchor="board",
            anchor_text=self._board_count_text(),
        )

    def randomize_look(self) -> LookSuggestion:
        suggestion = LookSuggestion(
            mode=LookMode.DRESS if self._rng.random() > 0.5 else LookMode.SKIRT,
            length=self._rng.choice(list(LookLength)),
            slit=self._rng.choice(list(SlitDepth)),
            accent=self._rng.choice(list(Accent)),
        )
        self._notifier.notify(RANDOMIZED)
        return suggestion

    async def _copy(
        self,
        text: str,
        success: Notice,
        *,
        anchor: str,
        anchor_text: str,
        throttled: bool = True,
    ) -> bool:
        try:
            await self._clipboard.write_text(text)
        except ClipboardError as exc:
            logger.warning("Clipboard write failed: %s", exc)
            self._notifier.notify(COPY_FAILED)
            return False
        self._notifier.notify(success)
        self._celebrate(anchor, anchor_text, throttled=throttled)
        return True
