"""Beans: issues stored as markdown files with YAML front matter."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any

import yaml

FRONT_MATTER_DELIMITER = "---"

_TAG_PATTERN = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")


class InvalidTagError(ValueError):
    """Raised when a tag does not follow the tag naming rules."""


class FrontMatterError(ValueError):
    """Raised when a bean's front matter cannot be parsed."""


def validate_tag(tag: str) -> None:
    """Raise InvalidTagError unless the tag is lowercase, URL-safe and a single word."""
    if not tag:
        raise InvalidTagError("tag cannot be empty")
    if not _TAG_PATTERN.match(tag):
        raise InvalidTagError(
            f"invalid tag {tag!r}: must be lowercase, start with a letter, "
            "and contain only letters, numbers, and hyphens"
        )


def normalize_tag(tag: str) -> str:
    """Return the canonical (trimmed, lowercase) form of a tag."""
    return tag.strip().lower()


def _format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


class _FrontMatterDumper(yaml.SafeDumper):
    """YAML dumper that writes timestamps in RFC 3339 form."""


def _represent_timestamp(dumper: yaml.SafeDumper, moment: datetime) -> yaml.Node:
    return dumper.represent_scalar("tag:yaml.org,2002:timestamp", _format_timestamp(moment))


_FrontMatterDumper.add_representer(datetime, _represent_timestamp)


@dataclass
class Bean:
    """An issue: identity, front matter fields and markdown body."""

    id: str = ""
    slug: str = ""
    path: str = ""
    title: str = ""
    status: str = ""
    type: str = ""
    priority: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    body: str = ""
    parent: str = ""
    blocking: list[str] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        """Return True if the bean carries the tag (compared case-insensitively)."""
        return normalize_tag(tag) in self.tags

    def add_tag(self, tag: str) -> None:
        """Add a normalized tag unless already present; raise InvalidTagError if invalid."""
        normalized = normalize_tag(tag)
        validate_tag(normalized)
        if not self.has_tag(normalized):
            self.tags.append(normalized)

    def remove_tag(self, tag: str) -> None:
        """Remove a tag, compared case-insensitively."""
        normalized = normalize_tag(tag)
        self.tags = [t for t in self.tags if t != normalized]

    def has_parent(self) -> bool:
        """Return True if the bean has a parent."""
        return bool(self.parent)

    def is_blocking(self, bean_id: str) -> bool:
        """Return True if this bean blocks the given bean."""
        return bean_id in self.blocking

    def add_blocking(self, bean_id: str) -> None:
        """Add a bean to the blocking list unless already present."""
        if not self.is_blocking(bean_id):
            self.blocking.append(bean_id)

    def remove_blocking(self, bean_id: str) -> None:
        """Remove a bean from the blocking list."""
        self.blocking = [target for target in self.blocking if target != bean_id]

    def _front_matter(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "status": self.status}
        if self.type:
            data["type"] = self.type
        if self.priority:
            data["priority"] = self.priority
        if self.tags:
            data["tags"] = list(self.tags)
        if self.created_at is not None:
            data["created_at"] = self.created_at
        if self.updated_at is not None:
            data["updated_at"] = self.updated_at
        if self.parent:
            data["parent"] = self.parent
        if self.blocking:
            data["blocking"] = list(self.blocking)
        return data

    def render(self) -> str:
        """Serialize the bean to markdown with YAML front matter."""
        header = yaml.dump(
            self._front_matter(),
            Dumper=_FrontMatterDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=1_000_000,
        )
        parts = [FRONT_MATTER_DELIMITER, "\n"]
        if self.id:
            parts.append(f"# {self.id}\n")
        parts.append(header)
        parts.append(FRONT_MATTER_DELIMITER + "\n")
        if self.body:
            if not self.body.startswith("\n"):
                parts.append("\n")
            parts.append(self.body)
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, leaving out empty optional fields."""
        data: dict[str, Any] = {"id": self.id}
        if self.slug:
            data["slug"] = self.slug
        data["path"] = self.path
        data["title"] = self.title
        data["status"] = self.status
        if self.type:
            data["type"] = self.type
        if self.priority:
            data["priority"] = self.priority
        if self.tags:
            data["tags"] = list(self.tags)
        if self.created_at is not None:
            data["created_at"] = _format_timestamp(self.created_at)
        if self.updated_at is not None:
            data["updated_at"] = _format_timestamp(self.updated_at)
        if self.body:
            data["body"] = self.body
        if self.parent:
            data["parent"] = self.parent
        if self.blocking:
            data["blocking"] = list(self.blocking)
        return data

    def to_json(self) -> str:
        """Return the bean as compact JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_DELIMITER


def _split_front_matter(text: str) -> tuple[str | None, str]:
    lines = text.split("\n")
    if not _is_delimiter(lines[0]):
        return None, text
    for index, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            return "\n".join(lines[1:index]), "\n".join(lines[index + 1 :])
    raise FrontMatterError("front matter is not closed")


def _text(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        raise FrontMatterError(f"field {name!r} must be a scalar")
    if isinstance(value, datetime):
        return _format_timestamp(value)
    return str(value)


def _text_list(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FrontMatterError(f"field {name!r} must be a list")
    return [_text(name, item) for item in value]


def _timestamp(name: str, value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise FrontMatterError(f"field {name!r} is not a valid timestamp: {value!r}") from exc
    else:
        raise FrontMatterError(f"field {name!r} is not a valid timestamp: {value!r}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def parse(text: str) -> Bean:
    """Read a bean from markdown text with optional YAML front matter."""
    header, body = _split_front_matter(text)
    if header is None:
        return Bean(body=body)
    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"parsing front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("parsing front matter: expected a mapping")
    return Bean(
        title=_text("title", data.get("title")),
        status=_text("status", data.get("status")),
        type=_text("type", data.get("type")),
        priority=_text("priority", data.get("priority")),
        tags=_text_list("tags", data.get("tags")),
        created_at=_timestamp("created_at", data.get("created_at")),
        updated_at=_timestamp("updated_at", data.get("updated_at")),
        body=body,
        parent=_text("parent", data.get("parent")),
        blocking=_text_list("blocking", data.get("blocking")),
    )