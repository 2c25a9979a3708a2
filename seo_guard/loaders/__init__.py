"""Content loading: Markdown/MDX files and their front matter."""

from seo_guard.loaders.content import (
    ContentFile,
    FrontmatterParse,
    parse_frontmatter,
    load_content_files,
    load_single_content_file,
    expand_targets,
    filter_content_files,
    sort_content_files,
    get_content_statistics,
)

__all__ = [
    "ContentFile",
    "FrontmatterParse",
    "parse_frontmatter",
    "load_content_files",
    "load_single_content_file",
    "expand_targets",
    "filter_content_files",
    "sort_content_files",
    "get_content_statistics",
]
