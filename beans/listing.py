"""Ordering and text helpers for listing beans."""

from __future__ import annotations

from collections.abc import Sequence

from beans.bean import Bean
from beans.sorting import NORMAL_PRIORITY, sort_by_status_priority_and_type

ELLIPSIS = "..."


def _newest_first(beans: list[Bean], attribute: str) -> list[Bean]:
    dated = sorted(
        (bean for bean in beans if getattr(bean, attribute) is not None),
        key=lambda bean: bean.id,
    )
    dated.sort(key=lambda bean: getattr(bean, attribute), reverse=True)
    undated = sorted(
        (bean for bean in beans if getattr(bean, attribute) is None),
        key=lambda bean: bean.id,
    )
    return dated + undated


def sort_beans(
    beans: list[Bean],
    sort_by: str,
    status_names: Sequence[str] | None,
    priority_names: Sequence[str] | None,
    type_names: Sequence[str] | None,
) -> None:
    """Sort beans in place by "created", "updated", "status", "priority" or "id".

    Any other value selects the default order: status, priority, type, title.
    """
    statuses = list(status_names or [])
    priorities = list(priority_names or [])

    if sort_by in ("created", "updated"):
        beans[:] = _newest_first(beans, f"{sort_by}_at")
    elif sort_by == "status":
        status_order = {name: index for index, name in enumerate(statuses)}
        beans.sort(key=lambda bean: (status_order.get(bean.status, 0), bean.id))
    elif sort_by == "priority":
        priority_order = {name: index for index, name in enumerate(priorities)}
        normal_index = (
            priorities.index(NORMAL_PRIORITY) if NORMAL_PRIORITY in priorities else len(priorities)
        )

        def rank(bean: Bean) -> int:
            if not bean.priority:
                return normal_index
            return priority_order.get(bean.priority, normal_index)

        beans.sort(key=lambda bean: (rank(bean), bean.id))
    elif sort_by == "id":
        beans.sort(key=lambda bean: bean.id)
    else:
        sort_by_status_priority_and_type(beans, statuses, priorities, type_names)


def truncate(text: str, max_len: int) -> str:
    """Shorten text to max_len characters, ending with "..." when cut."""
    if len(text) <= max_len:
        return text
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS