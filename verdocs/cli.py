from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import load_config
from .handler import Handler, VerdocsError


def usage():
    print(
        "\n".join(
            [
                "verdocs - versioned Markdown documentation renderer",
                "",
                "Usage:",
                "  verdocs render <PATH> [OUT]",
                "  verdocs serve",
                "",
                "Options:",
                "  -v, --verbose   log resolution and file lookups",
                "",
                "Examples:",
                "  verdocs render v2/guide.md out/guide.html",
                "  verdocs render ''",
                "",
                "Notes:",
                "  - Configuration comes from VERDOCS_DOCS_DIR, VERDOCS_DEFAULT_VERSION,",
                "    VERDOCS_PREFIX_URI and VERDOCS_DARK_THEME; serve also reads DOCS_HOST",
                "    and DOCS_PORT.",
                "  - render exits with 1 when the page falls back to the placeholder.",
            ]
        )
    )


def cmd_render(args) -> int:
    if len(args) not in (1, 2):
        usage(); return 2
    handler = Handler(load_config())
    page = handler.render(args[0])
    if len(args) == 2:
        out = Path(args[1])
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(page.body)
        print(f"Wrote {out}", file=sys.stderr)
    else:
        sys.stdout.buffer.write(page.body)
        sys.stdout.flush()
    if not page.found:
        print(f"No document for {args[0]!r}; rendered placeholder.", file=sys.stderr)
        return 1
    return 0


def cmd_serve(args) -> int:
    if args:
        usage(); return 2
    from api.docs_server import main as serve_main

    serve_main()
    return 0


def main(argv=None) -> int:
    argv = list(sys.argv if argv is None else argv)
    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in argv:
            argv.remove(flag)
            verbose = True
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if len(argv) < 2 or argv[1] in ("-h", "--help", "help"):
        usage(); return 0
    cmd = argv[1]
    args = argv[2:]
    try:
        if cmd == "render":
            return cmd_render(args)
        elif cmd == "serve":
            return cmd_serve(args)
        else:
            usage(); return 2
    except VerdocsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
