"""View state for the inventory page."""

from __future__ import annotations

import logging
from typing import Callable, FrozenSet, List, Optional

from ..catalog.grouping import CategoryIndex
from ..catalog.loader import Farmaco, fetch_farmacos
from ..catalog.summary import InventorySummary, summarize
from ..config.display import DisplayConfig
from ..logs import log_error, log_system

logger = logging.getLogger(__name__)


class ExpansionState:
    """Categories currently expanded in the view. Starts with none open."""

    def __init__(self) -> None:
        self._open: set[str] = set()

    def toggle(self, category: str) -> None:
        if category in self._open:
            self._open.remove(category)
        else:
            self._open.add(category)

    def is_expanded(self, category: str) -> bool:
        return category in self._open

    @property
    def expanded(self) -> FrozenSet[str]:
        return frozenset(self._open)


class InventoryView:
    """Owns the loaded items, the loading flag and the expansion state.

    Every mutation calls ``on_change`` so the host can re-render.
    """

    def __init__(self, source: str, display: Optional[DisplayConfig] = None,
                 on_change: Optional[Callable[[], None]] = None):
        self.source = source
        self.display = display or DisplayConfig()
        self.on_change = on_change
        self.loading = True
        self.items: List[Farmaco] = []
        self.index = CategoryIndex([])
        self.expansion = ExpansionState()

    def _refresh(self) -> None:
        if self.on_change is not None:
            self.on_change()

    async def load(self) -> None:
        """Load the item source once; a failure leaves the view empty."""
        try:
            items = await fetch_farmacos(self.source)
            self.items = items
            self.index = CategoryIndex(items)
            log_system(f"Inventory loaded from {self.source}: {len(items)} items, {len(self.index)} categories")
        except Exception as e:
            logger.error(f"Error loading farmacos from {self.source}: {e}")
            log_error(f"Error loading farmacos from {self.source}", e)
        finally:
            self.loading = False
            self._refresh()

    def toggle(self, category: str) -> None:
        self.expansion.toggle(category)
        self._refresh()

    def is_expanded(self, category: str) -> bool:
        return self.expansion.is_expanded(category)

    @property
    def categories(self) -> List[str]:
        return list(self.index.categories)

    def summary(self) -> InventorySummary:
        return summarize(self.items, self.index.categories, self.display.status_labels)
