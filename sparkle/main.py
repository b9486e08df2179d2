#!/usr/bin/env python3
"""
Magic Sparkle prompt enrichment CLI

Enriches a short request with context scraped from a saved HTML page.

Usage:
    magic-sparkle "How do I fix this bug?" --html page.html --url https://github.com/o/r
    magic-sparkle "Explain this" --quick                 # No page context
    magic-sparkle "Explain this" --html p.html --url U --json --validate
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from .app.handler import process_enhance_request
from .app.models import EnhanceResponse
from .config.settings import settings
from .context.classifier import detect_platform
from .context.extractor import scrape_page_context
from .context.models import PLATFORMS
from .context.scorer import assess_context
from .pipeline.enrichment import quick_enrich

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Context-aware prompt enrichment"
    )

    parser.add_argument(
        "text",
        help="The request to enrich",
    )

    parser.add_argument(
        "--html",
        type=Path,
        help="Saved HTML of the page the request is about",
    )

    parser.add_argument(
        "--url",
        default="",
        help="URL of that page (decides source type and persona)",
    )

    parser.add_argument(
        "--selection",
        default="",
        help="Text selected on the page",
    )

    parser.add_argument(
        "--platform",
        choices=PLATFORMS,
        help="Target chat platform (default: detected from --chat-url, else unknown)",
    )

    parser.add_argument(
        "--chat-url",
        default="",
        help="URL of the chat page, used to detect the platform",
    )

    parser.add_argument(
        "--max-tokens",
        type=int,
        default=settings.max_tokens,
        help=f"Token budget for page text (default: {settings.max_tokens})",
    )

    parser.add_argument(
        "--quick",
        action="store_true",
        help="Skip page context and use the generic persona",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the enhancement response as JSON",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Also report quality checks on the enriched prompt",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    platform = args.platform or detect_platform(args.chat_url)

    if args.quick or args.html is None:
        if not args.quick:
            logger.info("[CLI] No --html given, falling back to quick enrichment")
        start = time.perf_counter()
        enriched = quick_enrich(args.text, platform)
        if args.json:
            response = EnhanceResponse(
                success=True,
                enriched_prompt=enriched,
                processing_time_ms=(time.perf_counter() - start) * 1000,
            )
            print(json.dumps(response.to_wire(), indent=2))
        else:
            print(enriched)
        return 0

    html = args.html.read_text(encoding="utf-8", errors="replace")
    context = scrape_page_context(html, args.url, selection=args.selection, max_tokens=args.max_tokens)

    readiness = assess_context(context)
    logger.info(
        "[CLI] Context: %s, %d tokens, score %d (%s)",
        context.source_type,
        context.token_count,
        readiness.score,
        readiness.level,
    )

    response, report = process_enhance_request(
        {"userText": args.text, "context": context, "platform": platform}
    )
    if not args.validate:
        report = None

    if args.json:
        payload = response.to_wire()
        if report is not None:
            payload["validation"] = report.to_wire()
        print(json.dumps(payload, indent=2))
    elif response.success:
        print(response.enriched_prompt)
        if report is not None:
            status = "passed" if report.valid else "failed"
            print(f"\nValidation {status} (expansion {report.expansion_ratio:.1f}x)", file=sys.stderr)
            for issue in report.issues:
                print(f"  - {issue}", file=sys.stderr)
    else:
        print(f"Enhancement failed: {response.error}", file=sys.stderr)

    return 0 if response.success else 1


def cli() -> None:
    """CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
