"""Default ordering of beans."""

from __future__ import annotations

from collections.abc import Sequence

from beans.bean import Bean

NORMAL_PRIORITY = "normal"


def sort_by_status_priority_and_type(
    beans: list[Bean],
    status_names: Sequence[str] | None,
    priority_names: Sequence[str] | None,
    type_names: Sequence[str] | None,
) -> None:
    """Sort beans in place by status, priority, type, then case-insensitive title.

    Unknown statuses, priorities and types sort last within their category;
    a bean without a priority counts as "normal".
    """
    statuses = list(status_names or [])
    priorities = list(priority_names or [])
    types = list(type_names or [])

    status_order = {name: index for index, name in reversed(list(enumerate(statuses)))}
    priority_order = {name: index for index, name in reversed(list(enumerate(priorities)))}
    type_order = {name: index for index, name in reversed(list(enumerate(types)))}
    normal_order = priority_order.get(NORMAL_PRIORITY, len(priorities))

    def priority_rank(priority: str) -> int:
        if not priority:
            return normal_order
        return priority_order.get(priority, len(priorities))

    beans.sort(
        key=lambda bean: (
            status_order.get(bean.status, len(statuses)),
            priority_rank(bean.priority),
            type_order.get(bean.type, len(types)),
            bean.title.lower(),
        )
    )