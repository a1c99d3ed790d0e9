"""Roadmap of milestones, epics and the items planned under them."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

from beans.bean import Bean

MILESTONE = "milestone"
EPIC = "epic"
MAX_PARAGRAPH_BYTES = 200
ELLIPSIS = "..."
BADGE_COLORS = {
    "bug": "d73a4a",
    "feature": "0e8a16",
    "task": "1d76db",
    "epic": "5319e7",
    "milestone": "fbca04",
}
FALLBACK_BADGE_COLOR = "gray"
BADGE_URL = "https://img.shields.io/badge/{type}-{color}?style=flat-square"


@dataclass(frozen=True)
class Ordering:
    """Configured status and type order plus the statuses that count as archived."""

    status_names: tuple[str, ...] = ("in-progress", "todo", "draft", "completed", "scrapped")
    type_names: tuple[str, ...] = ("milestone", "epic", "bug", "feature", "task")
    archive_statuses: frozenset[str] = frozenset({"completed", "scrapped"})

    def is_archive_status(self, status: str) -> bool:
        """Return True if the status marks a bean as done."""
        return status in self.archive_statuses

    def _status_rank(self, status: str) -> int:
        return _rank(self.status_names, status)

    def _type_rank(self, bean_type: str) -> int:
        return _rank(self.type_names, bean_type)


def _rank(names: Sequence[str], name: str) -> int:
    # Unknown names rank like the first entry.
    ranks = {value: index for index, value in enumerate(names)}
    return ranks.get(name, 0)


@dataclass
class EpicGroup:
    """An epic and its visible child items."""

    epic: Bean
    items: list[Bean] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"epic": self.epic.to_dict()}
        if self.items:
            data["items"] = [item.to_dict() for item in self.items]
        return data


@dataclass
class MilestoneGroup:
    """A milestone with its epics and other direct children."""

    milestone: Bean
    epics: list[EpicGroup] = field(default_factory=list)
    other: list[Bean] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"milestone": self.milestone.to_dict()}
        if self.epics:
            data["epics"] = [group.to_dict() for group in self.epics]
        if self.other:
            data["other"] = [item.to_dict() for item in self.other]
        return data


@dataclass
class UnscheduledGroup:
    """Epics and items not assigned to any milestone."""

    epics: list[EpicGroup] = field(default_factory=list)
    other: list[Bean] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.epics:
            data["epics"] = [group.to_dict() for group in self.epics]
        if self.other:
            data["other"] = [item.to_dict() for item in self.other]
        return data


@dataclass
class Roadmap:
    """The whole roadmap: milestone groups and an optional unscheduled group."""

    milestones: list[MilestoneGroup] = field(default_factory=list)
    unscheduled: UnscheduledGroup | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"milestones": [group.to_dict() for group in self.milestones]}
        if self.unscheduled is not None:
            data["unscheduled"] = self.unscheduled.to_dict()
        return data


def _sort_by_status_then_created(beans: list[Bean], ordering: Ordering) -> None:
    def compare(left: Bean, right: Bean) -> int:
        left_rank = ordering._status_rank(left.status)
        right_rank = ordering._status_rank(right.status)
        if left_rank != right_rank:
            return -1 if left_rank < right_rank else 1
        if left.created_at is not None and right.created_at is not None:
            if left.created_at == right.created_at:
                return 0
            return -1 if left.created_at < right.created_at else 1
        if left.id == right.id:
            return 0
        return -1 if left.id < right.id else 1

    beans.sort(key=cmp_to_key(compare))


def _sort_by_type_then_status(beans: list[Bean], ordering: Ordering) -> None:
    beans.sort(
        key=lambda bean: (
            ordering._type_rank(bean.type),
            ordering._status_rank(bean.status),
            bean.id,
        )
    )


def _visible(children: Iterable[Bean], ordering: Ordering, include_done: bool) -> list[Bean]:
    return [
        child
        for child in children
        if include_done or not ordering.is_archive_status(child.status)
    ]


def _epic_group(
    epic: Bean, children: dict[str, list[Bean]], ordering: Ordering, include_done: bool
) -> EpicGroup | None:
    items = _visible(children.get(epic.id, ()), ordering, include_done)
    if not items:
        return None
    _sort_by_type_then_status(items, ordering)
    return EpicGroup(epic=epic, items=items)


def _milestone_group(
    milestone: Bean, children: dict[str, list[Bean]], ordering: Ordering, include_done: bool
) -> MilestoneGroup:
    direct = children.get(milestone.id, [])
    epics = [
        group
        for child in direct
        if child.type == EPIC
        for group in [_epic_group(child, children, ordering, include_done)]
        if group is not None
    ]
    epics.sort(key=lambda group: group.epic.title)
    other = _visible((child for child in direct if child.type != EPIC), ordering, include_done)
    _sort_by_type_then_status(other, ordering)
    return MilestoneGroup(milestone=milestone, epics=epics, other=other)


def build_roadmap(
    beans: Iterable[Bean],
    ordering: Ordering | None = None,
    include_done: bool = False,
    status_filter: Sequence[str] | None = None,
    no_status_filter: Sequence[str] | None = None,
) -> Roadmap:
    """Group beans into milestones, epics and unscheduled work.

    The status filters apply to milestones only; done items are hidden
    unless include_done is set.
    """
    ordering = ordering or Ordering()
    all_beans = list(beans)
    wanted = set(status_filter or ())
    unwanted = set(no_status_filter or ())

    children: dict[str, list[Bean]] = defaultdict(list)
    for bean in all_beans:
        if bean.parent:
            children[bean.parent].append(bean)

    milestones = [
        bean
        for bean in all_beans
        if bean.type == MILESTONE
        and (not wanted or bean.status in wanted)
        and bean.status not in unwanted
    ]
    _sort_by_status_then_created(milestones, ordering)

    milestone_groups = [
        group
        for group in (_milestone_group(m, children, ordering, include_done) for m in milestones)
        if group.epics or group.other
    ]

    under_milestone: set[str] = set()
    for milestone in milestones:
        under_milestone.add(milestone.id)
        for child in children.get(milestone.id, ()):
            under_milestone.add(child.id)
            if child.type == EPIC:
                under_milestone.update(grandchild.id for grandchild in children.get(child.id, ()))

    unscheduled_epics = [
        group
        for bean in all_beans
        if bean.type == EPIC and bean.id not in under_milestone
        for group in [_epic_group(bean, children, ordering, include_done)]
        if group is not None
    ]
    unscheduled_epics.sort(key=lambda group: group.epic.title)

    orphans = [
        bean
        for bean in all_beans
        if bean.type not in (MILESTONE, EPIC)
        and bean.id not in under_milestone
        and not bean.parent
        and (include_done or not ordering.is_archive_status(bean.status))
    ]
    _sort_by_type_then_status(orphans, ordering)

    unscheduled = None
    if unscheduled_epics or orphans:
        unscheduled = UnscheduledGroup(epics=unscheduled_epics, other=orphans)
    return Roadmap(milestones=milestone_groups, unscheduled=unscheduled)


def first_paragraph(body: str) -> str:
    """Return the first paragraph of a body as one line, skipping headings.

    Results longer than 200 bytes are cut and end with "...".
    """
    body = body.strip()
    if not body:
        return ""
    lines: list[str] = []
    for line in body.split("\n"):
        if not line.strip():
            break
        if line.startswith("#"):
            continue
        lines.append(line.strip())
    result = " ".join(lines)
    encoded = result.encode("utf-8")
    if len(encoded) > MAX_PARAGRAPH_BYTES:
        cut = MAX_PARAGRAPH_BYTES - len(ELLIPSIS)
        result = encoded[:cut].decode("utf-8", errors="ignore") + ELLIPSIS
    return result


def render_bean_ref(bean: Bean, as_link: bool, link_prefix: str = "") -> str:
    """Render a bean reference, optionally as a markdown link to its file."""
    if not as_link:
        return f"({bean.id})"
    if not link_prefix:
        return f"([{bean.id}]({bean.path}))"
    if not link_prefix.endswith("/"):
        link_prefix += "/"
    return f"([{bean.id}]({link_prefix}{bean.path}))"


def type_badge(bean: Bean) -> str:
    """Return a markdown badge image for the bean's type, or "" without a type."""
    if not bean.type:
        return ""
    color = BADGE_COLORS.get(bean.type, FALLBACK_BADGE_COLOR)
    url = BADGE_URL.format(type=bean.type, color=color)
    return f"![{bean.type}]({url})"