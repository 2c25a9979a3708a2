"""Central configuration for the content linter."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
CONTENT_DIR = Path(os.getenv("SEO_GUARD_CONTENT_DIR", "content"))
PUBLIC_DIR = Path(os.getenv("SEO_GUARD_PUBLIC_DIR", "public"))
REPORT_OUTPUT_DIR = Path(os.getenv("SEO_GUARD_OUTPUT_DIR", "output/reports"))

# Site metadata files the technical audit expects in PUBLIC_DIR
ROBOTS_FILENAME = "robots.txt"
SITEMAP_FILENAME = "sitemap.xml"

# ── Content loading ────────────────────────────────────────────────────────
CONTENT_EXTENSIONS = (".md", ".mdx")
MAX_FILES = int(os.getenv("SEO_GUARD_MAX_FILES", "1000"))
INCLUDE_DRAFTS = os.getenv("SEO_GUARD_INCLUDE_DRAFTS", "").lower() in ("1", "true", "yes")
IGNORED_DIRS = ("node_modules", ".git", "dist", "build")
DRAFTS_DIR = "drafts"

# ── Fix plan ───────────────────────────────────────────────────────────────
DEFAULT_PLAN_PATH = "fix-execution-plan.md"
