# darwin_palette/palette/grouping.py
"""Partition ranked results into display groups.

Groups follow the category declaration order (actions, pages, diseases,
medications, screenings). Within a group, items keep their ranked order.
The selection index is one 0-based space over all groups: a group's
``start_index`` is the number of items shown before it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from darwin_palette.config.defaults import DEFAULT_LOCALE
from darwin_palette.config.enums import ItemCategory
from darwin_palette.corpus.labels import category_label
from darwin_palette.corpus.models import SearchableItem
from darwin_palette.search.models import RankedResult


@dataclass(frozen=True)
class ResultGroup:
    category: ItemCategory
    label: str
    items: tuple[SearchableItem, ...]
    start_index: int

    def __len__(self) -> int:
        return len(self.items)

    def global_index(self, position: int) -> int:
        """Selection index of the item at ``position`` within this group."""
        return self.start_index + position


def category_labels(locale: str = DEFAULT_LOCALE) -> dict[ItemCategory, str]:
    """Heading for every category, including ones with no results."""
    return {category: category_label(category, locale) for category in ItemCategory}


def group_results(
    results: Sequence[RankedResult], locale: str = DEFAULT_LOCALE
) -> list[ResultGroup]:
    """Group ranked results; empty groups are omitted."""
    labels = category_labels(locale)
    buckets: dict[ItemCategory, list[SearchableItem]] = {c: [] for c in ItemCategory}
    for result in results:
        buckets[result.item.category].append(result.item)

    groups: list[ResultGroup] = []
    offset = 0
    for category in ItemCategory:
        items = buckets[category]
        if not items:
            continue
        groups.append(
            ResultGroup(
                category=category,
                label=labels[category],
                items=tuple(items),
                start_index=offset,
            )
        )
        offset += len(items)
    return groups


def flatten(groups: Sequence[ResultGroup]) -> list[SearchableItem]:
    """Items in selection-index order."""
    return [item for group in groups for item in group.items]


def total_count(groups: Sequence[ResultGroup]) -> int:
    return sum(len(group.items) for group in groups)


def item_at(groups: Sequence[ResultGroup], index: int) -> SearchableItem | None:
    """Item under selection ``index``, or None when out of range."""
    if index < 0:
        return None
    for group in groups:
        if group.start_index <= index < group.start_index + len(group.items):
            return group.items[index - group.start_index]
    return None
