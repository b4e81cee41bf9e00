import argparse
from domainsage.config.loader import VALIDATION_MODES


def get_parser():
    parser = argparse.ArgumentParser(description="domainsage: split URLs into domain components")
    parser.add_argument("--log-level", help="Logging level (default from config / DOMAINSAGE_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["console", "json"], help="Log output format")

    # ---- COMMON FLAGS (shared by the URL subcommands) ----
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("urls", nargs="*", metavar="URL", help="URLs or bare domains")
    common.add_argument(
        "-f", "--file",
        help="Read URLs from a file, one per line"
    )
    common.add_argument("--json", action="store_true", help='Output results in raw JSON format')

    mode = argparse.ArgumentParser(add_help=False)
    mode.add_argument(
        "--mode",
        choices=VALIDATION_MODES,
        default="standard",
        help="Validation mode (default: standard)"
    )

    # ---- SUBCOMMANDS ----
    subparsers = parser.add_subparsers(dest="command", required=True)

    #----PARSE----
    parse_parser = subparsers.add_parser("parse",
        parents=[common],
        help="Split URLs into subdomain, domain, tld, path and query")
    parse_parser.add_argument("--strict", action="store_true", help="Exit with an error on the first invalid URL")

    #----CHECK----
    check_parser = subparsers.add_parser("check",
        parents=[common, mode],
        help="Validate URLs against a validation mode")
    check_parser.add_argument("--no-protocol", action="store_true", help="Do not require a protocol")
    check_parser.add_argument("--allow-http", action="store_true", help="Accept http:// as well as https://")

    #----FORMAT----
    format_parser = subparsers.add_parser("format",
        parents=[common, mode],
        help="Rewrite URLs as scheme + host")
    format_parser.add_argument("--no-protocol", action="store_true", help="Leave the protocol out")
    format_parser.add_argument("--http", action="store_true", help="Use http:// instead of https://")
    format_parser.add_argument("--trailing-slash", action="store_true", help="End the URL with a slash")

    #----QUERY----
    query_parser = subparsers.add_parser("query",
        help="Decode a raw query string")
    query_parser.add_argument("query", help="Query string, without the leading '?'")
    query_parser.add_argument("--json", action="store_true", help='Output results in raw JSON format')

    return parser
