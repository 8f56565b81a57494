"""
recprobe - structural hints for undocumented binary formats (read-only)

- hex/ASCII dump of a byte range
- literal text search with context dumps (optionally UTF-16LE too)
- repeating 2/4/8-byte patterns with distances (record delimiter candidates)
- printable text runs (ASCII + Latin-1 high range)

Usage:
  recprobe data.fdi --bytes 512 --offset 0x100 --search "Smith"
  recprobe data.fdi --json --summary | jq .patterns

Exit codes: 0 ok, 1 input unreadable, 2 bad config, 3 dump offset out of range.
"""
import argparse
import sys

from . import config, report, source

EXIT_OK = 0
EXIT_SOURCE = 1
EXIT_CONFIG = 2
EXIT_RANGE = 3


def _int(x):
    try:
        return config.to_int(x)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {x!r}") from None


def build_parser():
    ap = argparse.ArgumentParser(prog="recprobe",
                                 description="Heuristic structure probe for unknown binary files")
    ap.add_argument("file", help="file to analyze")
    ap.add_argument("--bytes", dest="dump_bytes", type=_int, help="number of bytes to dump (default 256)")
    ap.add_argument("--offset", type=_int, help="starting offset of the dump (default 0)")
    ap.add_argument("--search", default="", help="text to search for (case sensitive)")
    ap.add_argument("--utf16", action="store_true", help="also search the UTF-16LE encoding of --search")
    ap.add_argument("--config", help=f"YAML settings file (default: ${config.ENV_VAR})")
    ap.add_argument("--lookahead", type=_int, help="pattern repeat window in bytes (default 1000)")
    ap.add_argument("--min-occurrences", type=_int, help="occurrences needed to report a pattern (default 3)")
    ap.add_argument("--max-patterns", type=_int, help="patterns to report (default 5)")
    ap.add_argument("--min-length", dest="min_string_length", type=_int,
                    help="minimum text run length (default 4)")
    ap.add_argument("--max-strings", type=_int, help="text runs to report (default 10)")
    ap.add_argument("--no-flush-trailing", dest="flush_trailing", action="store_false", default=None,
                    help="ignore a text run still open at end of file")
    ap.add_argument("--summary", action="store_true", help="add SHA-256, entropy and zero-byte share")
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    return ap


OVERRIDES = ("dump_bytes", "offset", "lookahead", "min_occurrences", "max_patterns",
             "min_string_length", "max_strings", "flush_trailing")


def main(argv=None, environ=None):
    args = build_parser().parse_args(argv)
    try:
        conf = config.resolve(args.config, {k: getattr(args, k) for k in OVERRIDES}, environ)
    except config.ConfigError as e:
        print(f"[config] {e}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        data = source.load(args.file)
    except source.SourceError as e:
        print(f"[recprobe] Error reading file: {e}", file=sys.stderr)
        return EXIT_SOURCE

    res = report.collect(data, conf, term=args.search, utf16=args.utf16,
                         with_summary=args.summary, name=args.file)
    if args.json:
        print(report.render_json(res))
    else:
        sys.stdout.write(report.render_text(data, res))

    err = report.dump_error(res)
    if err:
        print(f"[recprobe] {err}", file=sys.stderr)
        return EXIT_RANGE
    return EXIT_OK
