"""Load Markdown/MDX content files and split off their YAML front matter."""

from __future__ import annotations

import glob
import re
import sys
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, NamedTuple, Optional

import yaml

from seo_guard.config import (
    CONTENT_EXTENSIONS,
    DRAFTS_DIR,
    IGNORED_DIRS,
    INCLUDE_DRAFTS,
    MAX_FILES,
)
from seo_guard.errors import ContentLoadError

FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontmatterParse(NamedTuple):
    """Result of splitting a document: ``error`` is set when the YAML was unusable."""

    data: dict
    body: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ContentFile:
    path: Path
    content: str
    frontmatter: dict = field(default_factory=dict)
    body: str = ""
    last_modified: Optional[datetime] = None


def parse_frontmatter(text: str) -> FrontmatterParse:
    """Split ``text`` into front matter and body.

    Only a block that opens on the very first line counts. Invalid YAML, or
    YAML that is not a mapping, gives empty data plus an error message; the
    body is still returned.
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return FrontmatterParse({}, text)

    body = text[match.end():]
    try:
        data = yaml.safe_load(match.group(1))
    except (yaml.YAMLError, ValueError) as e:
        # ValueError: impossible timestamps such as 2025-02-30
        return FrontmatterParse({}, body, f"Invalid front matter: {e}")

    if data is None:
        return FrontmatterParse({}, body)
    if not isinstance(data, dict):
        return FrontmatterParse({}, body, f"Front matter is a {type(data).__name__}, not a mapping")
    return FrontmatterParse(data, body)


# ── Loading ───────────────────────────────────────────────────────────────


def _read_content_file(path: Path) -> ContentFile:
    content = path.read_text(encoding="utf-8")
    parsed = parse_frontmatter(content)
    if not parsed.ok:
        print(f"  ⚠ {path}: {parsed.error}", file=sys.stderr)
    return ContentFile(
        path=path,
        content=content,
        frontmatter=parsed.data,
        body=parsed.body,
        last_modified=datetime.fromtimestamp(path.stat().st_mtime),
    )


def _is_excluded(relative: Path, include_drafts: bool) -> bool:
    parents = relative.parts[:-1]
    if any(part in IGNORED_DIRS for part in parents):
        return True
    if not include_drafts:
        if DRAFTS_DIR in parents or ".draft." in relative.name:
            return True
    return False


def load_content_files(
    content_path: str | Path,
    extensions: Iterable[str] = CONTENT_EXTENSIONS,
    recursive: bool = True,
    include_drafts: bool = INCLUDE_DRAFTS,
    max_files: int = MAX_FILES,
) -> list[ContentFile]:
    """Load a single file, or every matching file under a directory.

    Files are returned in path order. Unreadable files inside a directory are
    reported and skipped; a missing path or an unreadable single file raises
    ContentLoadError.
    """
    root = Path(content_path)
    if not root.exists():
        raise ContentLoadError(f"Content path does not exist: {root}")

    if root.is_file():
        try:
            return [_read_content_file(root)]
        except (OSError, UnicodeDecodeError) as e:
            raise ContentLoadError(f"Could not read {root}: {e}") from e

    suffixes = tuple(extensions)
    pattern = "**/*" if recursive else "*"
    candidates = sorted(
        p for p in root.glob(pattern)
        if p.is_file()
        and p.name.endswith(suffixes)
        and not _is_excluded(p.relative_to(root), include_drafts)
    )

    files = []
    for path in candidates[:max_files]:
        try:
            files.append(_read_content_file(path))
        except (OSError, UnicodeDecodeError) as e:
            print(f"  ⚠ Could not load file {path}: {e}", file=sys.stderr)
    return files


def load_single_content_file(path: str | Path) -> Optional[ContentFile]:
    try:
        files = load_content_files(path)
    except ContentLoadError:
        return None
    return files[0] if files else None


def expand_targets(targets: Iterable[str]) -> list[str]:
    """Expand glob patterns in CLI targets; plain paths pass through."""
    expanded = []
    for target in targets:
        if any(ch in target for ch in "*?["):
            expanded.extend(sorted(glob.glob(target, recursive=True)))
        else:
            expanded.append(target)
    return expanded


# ── Filtering, sorting, statistics ────────────────────────────────────────


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def filter_content_files(
    files: list[ContentFile],
    category: str | list[str] | None = None,
    tag: str | list[str] | None = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    status: Optional[str] = None,
) -> list[ContentFile]:
    """Keep files matching every given filter. Undated files pass date filters."""
    categories = _as_list(category)
    tags = _as_list(tag)

    def keep(file: ContentFile) -> bool:
        fm = file.frontmatter
        if categories:
            file_category = fm.get("category") or fm.get("categories")
            if not file_category or file_category not in categories:
                return False
        if tags:
            file_tags = _as_list(fm.get("tags") or fm.get("tag"))
            if not any(t in file_tags for t in tags):
                return False
        if start or end:
            file_date = _as_date(fm.get("date"))
            if file_date is not None:
                if start and file_date < start:
                    return False
                if end and file_date > end:
                    return False
        if status and fm.get("status") != status:
            return False
        return True

    return [f for f in files if keep(f)]


def sort_content_files(
    files: list[ContentFile],
    sort_by: str = "date",
    order: str = "desc",
) -> list[ContentFile]:
    keys = {
        "date": lambda f: _as_date(f.frontmatter.get("date")) or date.min,
        "title": lambda f: str(f.frontmatter.get("title") or f.path.name),
        "last_modified": lambda f: f.last_modified or datetime.min,
        "size": lambda f: len(f.content),
    }
    if sort_by not in keys:
        raise ValueError(f"Unknown sort key: {sort_by} (expected one of {', '.join(keys)})")
    return sorted(files, key=keys[sort_by], reverse=(order == "desc"))


def get_content_statistics(files: list[ContentFile]) -> dict:
    total_words = 0
    categories: dict[str, int] = {}
    tags: dict[str, int] = {}
    earliest = latest = None

    for f in files:
        total_words += len(f.body.split())

        category = f.frontmatter.get("category") or f.frontmatter.get("categories")
        if category:
            categories[str(category)] = categories.get(str(category), 0) + 1

        for t in _as_list(f.frontmatter.get("tags") or f.frontmatter.get("tag")):
            if t:
                tags[str(t)] = tags.get(str(t), 0) + 1

        file_date = _as_date(f.frontmatter.get("date"))
        if file_date is not None:
            if earliest is None or file_date < earliest:
                earliest = file_date
            if latest is None or file_date > latest:
                latest = file_date

    return {
        "total_files": len(files),
        "total_words": total_words,
        "average_words": int(total_words / len(files) + 0.5) if files else 0,
        "categories": categories,
        "tags": tags,
        "date_range": {"earliest": earliest, "latest": latest},
    }
