"""CLI entry point for rendering theme fragments.

Usage:
    python -m uwtheme.template_engine.main
    python -m uwtheme.template_engine.main --input fixtures/sample_render_context.json --fragment footer
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from uwtheme.common.config import FIXTURES_DIR
from uwtheme.common.logging import setup_logging

from .renderer import ThemeRenderer, load_comments_from_json, load_render_context_from_json

logger = setup_logging(module_name="template_engine.main")

FRAGMENTS = ("body_class", "banner", "posted_on", "excerpt", "content_nav", "comments", "searchform", "footer")
LIFECYCLE_ACTIONS = ("after_setup_theme", "widgets_init", "wp_enqueue_scripts")


def render_fragments(renderer: ThemeRenderer, input_path: Path, fragments: list[str]) -> str:
    """Render the requested fragments for one render context, in order."""
    context = load_render_context_from_json(input_path)
    comments = load_comments_from_json(input_path)

    for action in LIFECYCLE_ACTIONS:
        if renderer.hooks.did_action(action) == 0:
            renderer.hooks.do_action(action)

    output = []
    for fragment in fragments:
        if fragment == "body_class":
            output.append(renderer.body_class_attribute(context))
        elif fragment == "banner":
            output.append(renderer.render_banner(context.site_name or None))
        elif fragment == "posted_on" and context.post is not None:
            output.append(renderer.render_posted_on(context.post))
        elif fragment == "excerpt":
            output.append(renderer.render_excerpt(context))
        elif fragment == "content_nav":
            output.append(renderer.render_content_nav(context))
        elif fragment == "comments":
            output.append(renderer.render_comment_list(comments))
        elif fragment == "searchform":
            output.append(renderer.render_search_form(context.home_url))
        elif fragment == "footer":
            output.append(renderer.render_footer(context))
    return "\n".join(part for part in output if part)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render UW-Madison theme fragments")
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to a render context JSON file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output path for rendered HTML (default: stdout)",
    )
    parser.add_argument(
        "--fragment",
        action="append",
        choices=FRAGMENTS,
        help="Fragment to render; repeat for several (default: all)",
    )

    args = parser.parse_args()

    input_path = args.input
    if input_path is None:
        input_path = FIXTURES_DIR / "sample_render_context.json"
        if not input_path.exists():
            logger.error("No input file specified and sample fixture not found")
            sys.exit(1)
        logger.info("Using sample fixture: %s", input_path)

    rendered = render_fragments(ThemeRenderer(), input_path, args.fragment or list(FRAGMENTS))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered)
        logger.info("Rendered fragments written to: %s", args.output)
    else:
        print(rendered)


if __name__ == "__main__":
    main()
