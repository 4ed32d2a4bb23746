#!/usr/bin/env python3
"""
Write sitemap.xml for a documentation directory.

Useful for static deployments where the API's /sitemap.xml is not served.
Pass ``--output -`` to print the sitemap instead of writing a file.
"""

import os
import sys
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import get_settings
from docs_index import build_docs_structure, generate_sitemap, write_sitemap
from observability.logging import setup_logging


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="CodexCrafters sitemap generator")
    parser.add_argument("--docs-dir", default=settings.docs_dir,
                        help="Documentation root to scan")
    parser.add_argument("--base-url", default=settings.site_url,
                        help="Public site URL used in <loc> entries")
    parser.add_argument("--output", default="sitemap.xml",
                        help="Where to write the sitemap, or - for stdout")
    args = parser.parse_args(argv)

    # setup_logging writes to stdout, which carries the sitemap with --output -
    if args.output != "-":
        setup_logging(level=settings.log_level)

    if not os.path.isdir(args.docs_dir):
        print(f"❌ Docs directory not found: {args.docs_dir}", file=sys.stderr)
        return 1

    if args.output == "-":
        sys.stdout.write(generate_sitemap(build_docs_structure(args.docs_dir), args.base_url))
        return 0

    count = write_sitemap(args.docs_dir, args.base_url, args.output)
    print(f"✅ Wrote {count} URLs to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
