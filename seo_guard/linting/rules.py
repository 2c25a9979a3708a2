"""SEO guard-rail rules and the registry that orders them.

Each rule is a pure function of ``(content, frontmatter, filename)``. Rules
never look at each other's results and never touch the filesystem, so the
same document always produces the same verdicts.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Optional

from seo_guard.linting.models import Rule, RuleVerdict

# ── Vocabularies ──────────────────────────────────────────────────────────

PRIMARY_KEYWORDS = (
    "gtm as code",
    "modern marketing",
    "developer marketing",
    "product-led growth",
    "product-led sales",
    "content linter",
    "seo guard rails",
    "ai search optimization",
    "vibe coding",
    "telemetry",
    "growth reviews",
    "pricing as a product",
    "posthog",
)

SECONDARY_KEYWORDS = (
    "content as code",
    "growth engineering",
    "continuous marketing",
    "observability",
    "open handbook",
    "repo-first website",
    "changelog automation",
    "feature flags",
    "internal tools",
    "brand consistency",
)

ALLOWED_CATEGORIES = ("gtm", "SEO", "vibe coding", "OUT-OF-STEALTH")

GENERIC_ANCHOR_TEXTS = ("click here", "here", "link", "read more")
BARE_URL_PREFIXES = ("http://", "https://", "www.")

# ── Thresholds ────────────────────────────────────────────────────────────

TITLE_MIN, TITLE_MAX = 45, 70
SUMMARY_MIN, SUMMARY_MAX = 120, 160
OPENING_WORDS = 100
MAX_SENTENCE_WORDS = 30
MAX_KEYWORD_DENSITY = 2.5  # percent

# ── Patterns ──────────────────────────────────────────────────────────────

FRONTMATTER_BLOCK = re.compile(r"^---[\s\S]*?---", re.MULTILINE)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
READTIME_PATTERN = re.compile(r"\d+\s+min\s+read")
FILENAME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}-.+\.mdx?")
H1_PATTERN = re.compile(r"^# ", re.MULTILINE)
HEADING_PATTERN = re.compile(r"^(#{2,6}) .+$", re.MULTILINE)
INTERNAL_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\((/[^)]+|#[^)]+)\)")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\([^)]+\)")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"[.!?]+")
UNCLOSED_LINK_PATTERNS = (
    re.compile(r"\[[^\]]*\n"),
    re.compile(r"\]\([^)]*\n"),
)
DEEP_HEADING_PATTERN = re.compile(r"^#{7,}", re.MULTILINE)
CODE_FENCE = "```"

PLACEHOLDER_PATTERNS = (
    re.compile(r"\[([^\]]+)\]\(#\)"),
    re.compile(r"\[([^\]]+)\]\(/todo\)", re.IGNORECASE),
    re.compile(r"example\.com", re.IGNORECASE),
    re.compile(r"lorem\s+ipsum", re.IGNORECASE),
    re.compile(r"\btbd\b", re.IGNORECASE),
    re.compile(r"\bfixme\b", re.IGNORECASE),
    re.compile(r"\btodo\b(?!:)", re.IGNORECASE),  # "TODO:" notes are allowed
)


# ── Helpers ───────────────────────────────────────────────────────────────


def strip_frontmatter(content: str) -> str:
    """Remove the first ``---`` ... ``---`` block from the raw content."""
    return FRONTMATTER_BLOCK.sub("", content, count=1)


def _as_text(value: Any) -> str:
    # YAML loaders turn unquoted dates into date objects
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _field(frontmatter: Mapping[str, Any], *keys: str) -> Optional[str]:
    """First truthy value among ``keys``, as text, or None."""
    for key in keys:
        value = frontmatter.get(key)
        if value:
            return _as_text(value)
    return None


def _line_of(content: str, offset: int) -> int:
    return content.count("\n", 0, offset) + 1


def _contains_keyword(text: str, keywords) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


# ── Front matter rules (SEO-001 to SEO-006) ───────────────────────────────


def check_title(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    title = _field(frontmatter, "title")
    if title is None:
        return RuleVerdict(
            passed=False,
            message="Title is required in frontmatter",
            suggestion=f"Add a title field with {TITLE_MIN}-{TITLE_MAX} characters",
        )

    length = len(title)
    if length < TITLE_MIN or length > TITLE_MAX:
        return RuleVerdict(
            passed=False,
            message=f"Title length is {length} chars (should be {TITLE_MIN}-{TITLE_MAX})",
            suggestion=(
                "Make title longer and more descriptive"
                if length < TITLE_MIN
                else "Shorten title for better SEO"
            ),
        )

    first_half = title.lower()[: length // 2]
    if not _contains_keyword(first_half, PRIMARY_KEYWORDS):
        return RuleVerdict(
            passed=False,
            message="No primary keyword found in title start",
            suggestion=f"Include one of these keywords near the beginning: {', '.join(PRIMARY_KEYWORDS)}",
        )

    return RuleVerdict(passed=True, message=f"Title validated: {length} chars with keyword")


def check_date(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    value = _field(frontmatter, "date")
    if value is None:
        return RuleVerdict(
            passed=False,
            message="Date is required in frontmatter",
            suggestion="Add date field in YYYY-MM-DD format",
        )

    if not DATE_PATTERN.fullmatch(value):
        return RuleVerdict(
            passed=False,
            message=f"Invalid date format: {value}",
            suggestion="Use YYYY-MM-DD format (e.g., 2025-01-15)",
        )

    return RuleVerdict(passed=True, message=f"Date format validated: {value}")


def check_category(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    category = _field(frontmatter, "category")
    allowed = ", ".join(ALLOWED_CATEGORIES)
    if category is None:
        return RuleVerdict(
            passed=False,
            message="Category is required in frontmatter",
            suggestion=f"Add category field. Allowed: {allowed}",
        )

    if category not in ALLOWED_CATEGORIES:
        return RuleVerdict(
            passed=False,
            message=f"Invalid category: {category}",
            suggestion=f"Use one of: {allowed}",
        )

    return RuleVerdict(passed=True, message=f"Category validated: {category}")


def check_summary(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    summary = _field(frontmatter, "summary")
    if summary is None:
        return RuleVerdict(
            passed=False,
            message="Summary is required in frontmatter",
            suggestion=f"Add summary field with {SUMMARY_MIN}-{SUMMARY_MAX} characters describing the content",
        )

    length = len(summary)
    if length < SUMMARY_MIN or length > SUMMARY_MAX:
        return RuleVerdict(
            passed=False,
            message=f"Summary length is {length} chars (should be {SUMMARY_MIN}-{SUMMARY_MAX})",
            suggestion=(
                "Expand summary with more detail"
                if length < SUMMARY_MIN
                else "Shorten summary for better meta description"
            ),
        )

    if not _contains_keyword(summary, PRIMARY_KEYWORDS + SECONDARY_KEYWORDS):
        return RuleVerdict(
            passed=False,
            message="No target keywords found in summary",
            suggestion="Include 1-2 relevant keywords naturally in the summary",
        )

    return RuleVerdict(passed=True, message=f"Summary validated: {length} chars with keywords")


def check_readtime(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    readtime = _field(frontmatter, "Readtime", "readtime")
    if readtime is None:
        return RuleVerdict(
            passed=False,
            message="Readtime is required in frontmatter",
            suggestion='Add Readtime field (e.g., "5 min read")',
        )

    if not READTIME_PATTERN.fullmatch(readtime):
        return RuleVerdict(
            passed=False,
            message=f"Invalid readtime format: {readtime}",
            suggestion='Use format like "3 min read"',
        )

    return RuleVerdict(passed=True, message=f"Readtime validated: {readtime}")


def check_filename(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    if not filename:
        return RuleVerdict(
            passed=False,
            message="Filename not provided for validation",
            suggestion="Ensure filename follows YYYY-MM-DD-slug.md format",
        )

    if not FILENAME_PATTERN.fullmatch(filename):
        return RuleVerdict(
            passed=False,
            message=f"Invalid filename format: {filename}",
            suggestion="Use YYYY-MM-DD-slug.md format",
        )

    file_date = filename[:10]
    fm_date = _field(frontmatter, "date")
    if fm_date and fm_date != file_date:
        return RuleVerdict(
            passed=False,
            message=f"Filename date ({file_date}) doesn't match frontmatter date ({fm_date})",
            suggestion="Ensure filename date matches frontmatter date",
        )

    return RuleVerdict(passed=True, message=f"Filename validated: {filename}")


# ── Structure rules (SEO-010 to SEO-014) ──────────────────────────────────


def check_single_h1(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    matches = list(H1_PATTERN.finditer(content))
    if matches:
        return RuleVerdict(
            passed=False,
            message=f"Found {len(matches)} H1 heading(s) in content body",
            suggestion="Remove H1 headings from body. H1 comes from frontmatter title.",
            line=_line_of(content, matches[0].start()),
        )

    if _field(frontmatter, "title") is None:
        return RuleVerdict(
            passed=False,
            message="No H1 available - missing title in frontmatter",
            suggestion="Add title in frontmatter to serve as H1",
        )

    return RuleVerdict(passed=True, message="H1 structure validated (title only)")


def check_heading_hierarchy(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    """Compare each heading only with the one right before it.

    H2 -> H3 -> H2 -> H4 fails on the last step even though an H3 was seen
    earlier.
    """
    headings = list(HEADING_PATTERN.finditer(content))
    for previous, current in zip(headings, headings[1:]):
        prev_level = len(previous.group(1))
        cur_level = len(current.group(1))
        if cur_level > prev_level + 1:
            return RuleVerdict(
                passed=False,
                message=f"Heading jump detected: H{prev_level} to H{cur_level}",
                suggestion="Use sequential heading levels (H2 → H3, not H2 → H4)",
                line=_line_of(content, current.start()),
            )

    return RuleVerdict(passed=True, message=f"Heading hierarchy validated ({len(headings)} headings)")


def check_keyword_in_opening(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    words = strip_frontmatter(content).split()[:OPENING_WORDS]
    opening = " ".join(words)

    if not _contains_keyword(opening, PRIMARY_KEYWORDS):
        return RuleVerdict(
            passed=False,
            message=f"No primary keyword found in first {OPENING_WORDS} words",
            suggestion=f"Naturally include a primary keyword: {', '.join(PRIMARY_KEYWORDS[:3])}",
        )

    return RuleVerdict(passed=True, message="Primary keyword found in opening content")


def check_internal_links(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    count = len(INTERNAL_LINK_PATTERN.findall(content))
    if count == 0:
        return RuleVerdict(
            passed=False,
            message="No internal links found",
            suggestion="Add at least one internal link to related content",
        )

    return RuleVerdict(passed=True, message=f"Internal linking validated ({count} links)")


def is_generic_anchor(text: str) -> bool:
    anchor = text.strip().lower()
    return anchor in GENERIC_ANCHOR_TEXTS or anchor.startswith(BARE_URL_PREFIXES)


def check_link_text(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    anchors = LINK_PATTERN.findall(content)
    bad = [anchor.strip() for anchor in anchors if is_generic_anchor(anchor)]

    if bad:
        listed = ", ".join(f'"{anchor}"' for anchor in bad)
        return RuleVerdict(
            passed=False,
            message=f"Found {len(bad)} non-descriptive link(s): {listed}",
            suggestion='Use descriptive anchor text instead of URLs or "click here"',
        )

    return RuleVerdict(passed=True, message=f"Link text validated ({len(anchors)} links)")


# ── Media rules (SEO-020) ─────────────────────────────────────────────────


def check_image_alt_text(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    alts = IMAGE_PATTERN.findall(content)
    if not alts:
        return RuleVerdict(passed=True, message="No images found - validation passed")

    missing = [alt for alt in alts if not alt.strip()]
    if missing:
        return RuleVerdict(
            passed=False,
            message=f"{len(missing)} image(s) missing alt text",
            suggestion="Add descriptive alt text for all images",
        )

    return RuleVerdict(passed=True, message=f"Image alt text validated ({len(alts)} images)")


# ── Technical rules (SEO-031) ─────────────────────────────────────────────


def find_placeholders(content: str) -> list[str]:
    found = []
    for pattern in PLACEHOLDER_PATTERNS:
        found.extend(match.group(0) for match in pattern.finditer(content))
    return found


def check_placeholders(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    found = find_placeholders(content)
    if found:
        return RuleVerdict(
            passed=False,
            message=f"Found {len(found)} placeholder(s): {', '.join(found[:3])}",
            suggestion="Replace placeholder content with real links and text",
        )

    return RuleVerdict(passed=True, message="No placeholder content found")


# ── Readability rules (SEO-040) ───────────────────────────────────────────


def check_sentence_length(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    body = strip_frontmatter(content).strip()
    paragraphs = [p for p in PARAGRAPH_BREAK.split(body) if p.strip()]

    if len(paragraphs) < 2:
        return RuleVerdict(passed=True, message="Not enough paragraphs for sentence analysis")

    opening = " ".join(paragraphs[:2])
    sentences = [s for s in SENTENCE_BREAK.split(opening) if s.strip()]
    long_sentences = [s for s in sentences if len(s.split()) > MAX_SENTENCE_WORDS]

    if long_sentences:
        return RuleVerdict(
            passed=False,
            message=f"{len(long_sentences)} sentence(s) over {MAX_SENTENCE_WORDS} words in opening",
            suggestion="Break long sentences into shorter ones for better readability",
        )

    return RuleVerdict(passed=True, message=f"Sentence length validated ({len(sentences)} sentences)")


# ── Prohibited patterns (SEO-051 to SEO-052) ──────────────────────────────


def check_markdown_syntax(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    issues = []

    if any(pattern.search(content) for pattern in UNCLOSED_LINK_PATTERNS):
        issues.append("Unclosed link syntax")

    if content.count(CODE_FENCE) % 2 != 0:
        issues.append("Unclosed code block")

    if DEEP_HEADING_PATTERN.search(content):
        issues.append("Invalid heading level (H7+)")

    if issues:
        return RuleVerdict(
            passed=False,
            message=f"Markdown syntax issues: {', '.join(issues)}",
            suggestion="Fix Markdown syntax errors",
        )

    return RuleVerdict(passed=True, message="Markdown syntax validated")


def keyword_densities(content: str) -> dict[str, float]:
    """Percentage of body words (longer than 2 chars) taken by each primary keyword."""
    body = strip_frontmatter(content).lower()
    total_words = len([w for w in body.split() if len(w) > 2])
    if total_words == 0:
        return {keyword: 0.0 for keyword in PRIMARY_KEYWORDS}
    return {
        keyword: body.count(keyword) * 100 / total_words
        for keyword in PRIMARY_KEYWORDS
    }


def check_keyword_density(content: str, frontmatter: Mapping[str, Any], filename: Optional[str] = None) -> RuleVerdict:
    for keyword, density in keyword_densities(content).items():
        if density > MAX_KEYWORD_DENSITY:
            return RuleVerdict(
                passed=False,
                message=f'Keyword "{keyword}" density is {density:.1f}% (should be < {MAX_KEYWORD_DENSITY}%)',
                suggestion="Reduce keyword repetition and vary your language",
            )

    return RuleVerdict(passed=True, message="Keyword density within acceptable range")


# ── Registry ──────────────────────────────────────────────────────────────

SEO_RULES: tuple[Rule, ...] = (
    Rule("SEO-001", "Title Requirements",
         "Title present, 45-70 characters, uses primary keyword near start",
         "error", check_title),
    Rule("SEO-002", "Date Format",
         "Date present in ISO YYYY-MM-DD format",
         "error", check_date),
    Rule("SEO-003", "Category Validation",
         "Category present and from allowed list",
         "error", check_category),
    Rule("SEO-004", "Summary Requirements",
         "Summary present, 120-160 characters, acts as meta description",
         "error", check_summary),
    Rule("SEO-005", "Read Time",
         'Readtime present (e.g., "3 min read")',
         "error", check_readtime),
    Rule("SEO-006", "Filename Validation",
         "Filename is date-prefixed slug matching the frontmatter date",
         "error", check_filename),
    Rule("SEO-010", "Single H1 Rule",
         "Exactly one H1 from frontmatter title, no # H1 in body",
         "error", check_single_h1),
    Rule("SEO-011", "Heading Hierarchy",
         "Use hierarchical headings H2/H3, no jumps",
         "warning", check_heading_hierarchy),
    Rule("SEO-012", "Keyword in Opening",
         "First 100 words mention primary keyword once, naturally",
         "warning", check_keyword_in_opening),
    Rule("SEO-013", "Internal Linking",
         "At least one internal link to relevant post/page",
         "warning", check_internal_links),
    Rule("SEO-014", "Descriptive Link Text",
         "Links use descriptive anchor text",
         "warning", check_link_text),
    Rule("SEO-020", "Image Alt Text",
         "Images have meaningful alt text",
         "error", check_image_alt_text),
    Rule("SEO-031", "No Placeholder Content",
         "No placeholder links or lorem ipsum",
         "error", check_placeholders),
    Rule("SEO-040", "Sentence Length",
         "Sentences under 30 words in first two paragraphs",
         "info", check_sentence_length),
    Rule("SEO-051", "Markdown Syntax",
         "No broken Markdown syntax",
         "error", check_markdown_syntax),
    Rule("SEO-052", "Keyword Density",
         "Keyword density under 2.5%",
         "warning", check_keyword_density),
)


def get_rule_by_id(rule_id: str) -> Optional[Rule]:
    return next((rule for rule in SEO_RULES if rule.id == rule_id), None)


def get_rules_by_severity(severity: str) -> list[Rule]:
    return [rule for rule in SEO_RULES if rule.severity == severity]


def get_all_rule_ids() -> list[str]:
    return [rule.id for rule in SEO_RULES]
