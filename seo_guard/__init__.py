"""SEO guard rails for Markdown/MDX content.

Package structure:
    seo_guard/config.py         – paths, content extensions, env overrides
    seo_guard/loaders/          – content discovery and front matter parsing
    seo_guard/linting/          – rule registry, evaluator, summaries, reports
    seo_guard/suggestions.py    – fix plan built from failing lint results
"""
