"""Base category derivation and the category -> items index."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .loader import Farmaco

DELIMITER = "/"


def split_categories(categoria: str) -> List[str]:
    """Split a compound category label into its trimmed base categories.

    ``"Aftas / Herpes"`` gives ``["Aftas", "Herpes"]``; a label without a
    delimiter gives a single element and ``""`` gives ``[""]``.
    """
    return [cat.strip() for cat in categoria.split(DELIMITER)]


def base_categories(items: Iterable[Farmaco]) -> List[str]:
    """Sorted union of every item's base categories."""
    found = set()
    for item in items:
        found.update(split_categories(item.category))
    return sorted(found)


class CategoryIndex:
    """Read-only mapping from base category to positions in the item list.

    An item with a compound category is listed under each of its base
    categories. Groups hold indices, the items themselves are only kept
    once in ``items``.
    """

    def __init__(self, items: Sequence[Farmaco]):
        self.items: Tuple[Farmaco, ...] = tuple(items)
        groups: Dict[str, List[int]] = {}
        for idx, item in enumerate(self.items):
            # dict.fromkeys dedupes "A/A" without losing segment order
            for cat in dict.fromkeys(split_categories(item.category)):
                groups.setdefault(cat, []).append(idx)
        self.categories: Tuple[str, ...] = tuple(sorted(groups))
        self._groups: Dict[str, Tuple[int, ...]] = {c: tuple(groups[c]) for c in self.categories}

    def __len__(self) -> int:
        return len(self.categories)

    def __contains__(self, category: str) -> bool:
        return category in self._groups

    def indices_for(self, category: str) -> Tuple[int, ...]:
        return self._groups.get(category, ())

    def items_for(self, category: str) -> List[Farmaco]:
        return [self.items[i] for i in self.indices_for(category)]

    def groups(self) -> List[Tuple[str, List[Farmaco]]]:
        """(category, items) pairs in display order."""
        return [(c, self.items_for(c)) for c in self.categories]

    def categories_of(self, idx: int) -> List[str]:
        return split_categories(self.items[idx].category)
