import sys
import json
from domainsage.exceptions import InvalidURLError
from domainsage.extractor import parse, parse_strict, decode_query
from domainsage.modes.formatter import format_url
from domainsage.modes.validation import DomainValidator
from domainsage.utils.cli_args import get_parser
from domainsage.utils.logging_config import configure_logging, get_logger


logger = get_logger(__name__)


def collect_urls(args):
    urls = list(args.urls)

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            urls.extend(line.strip() for line in f if line.strip())

    return urls


def handle_parse(args, urls):
    results = {}

    for url in urls:
        if args.strict:
            try:
                parsed = parse_strict(url)
            except InvalidURLError as e:
                print(f"[!] {url}: {e}")
                return 1
        else:
            parsed = parse(url)
        results[url] = parsed.to_dict() if parsed.is_valid else None

    if args.json:
        print(json.dumps(results, indent=2, sort_keys=False))
        return 0

    print("\n🔍 URL Breakdown\n" + "=" * 60)
    for url, result in results.items():
        if result is None:
            print(f"❌  {url}: invalid URL\n")
            continue

        print(f"URL: {url}")
        print(f" ↳ Host: {result['host']}")
        print(f" ↳ Subdomain: {result['subdomain'] or '-'}")
        print(f" ↳ Domain: {result['domain']}")
        print(f" ↳ TLD: {result['tld']}")
        print(f" ↳ Root Domain: {result['root_domain']}")
        print(f" ↳ Path: {result['path'] or '-'}")
        if result["query_params"]:
            print(" ↳ Query:")
            for key, value in result["query_params"].items():
                print(f"   - {key} = {value if value is not None else '(none)'}")
        print()

    return 0


def handle_check(args, urls):
    validator = DomainValidator(
        validation=args.mode,
        use_protocol=not args.no_protocol,
        use_https=not args.allow_http,
    )
    results = {url: validator.validate(url) for url in urls}

    if args.json:
        print(json.dumps(results, indent=2, sort_keys=False))
    else:
        print(f"\n✅ Validation ({args.mode})\n" + "=" * 60)
        for url, errors in results.items():
            if errors:
                print(f"❌  {url}: {'; '.join(errors)}")
            else:
                print(f"✅  {url}")
        print()

    return 1 if any(results.values()) else 0


def handle_format(args, urls):
    results = {
        url: format_url(
            url,
            validation=args.mode,
            use_protocol=not args.no_protocol,
            use_https=not args.http,
            use_trailing_slash=args.trailing_slash,
        )
        for url in urls
    }

    if args.json:
        print(json.dumps(results, indent=2, sort_keys=False))
    else:
        for url, formatted in results.items():
            print(f"{url} => {formatted if formatted is not None else '(invalid)'}")

    return 0 if all(v is not None for v in results.values()) else 1


def handle_query(args):
    params = decode_query(args.query)

    if args.json:
        print(json.dumps(params, indent=2, sort_keys=False))
    elif not params:
        print("⚠️  No query parameters decoded.")
    else:
        for key, value in params.items():
            print(f"{key} = {value if value is not None else '(none)'}")

    return 0


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_format=args.log_format)

    if args.command == "query":
        return handle_query(args)

    try:
        urls = collect_urls(args)
    except OSError as e:
        print(f"[!] Failed to read URL file: {e}")
        return 2

    if not urls:
        print("[!] No URLs given. Pass them as arguments or use --file <path>")
        return 2

    logger.debug("Running %s on %d URL(s)", args.command, len(urls))

    if args.command == "parse":
        return handle_parse(args, urls)
    elif args.command == "check":
        return handle_check(args, urls)
    elif args.command == "format":
        return handle_format(args, urls)

    print(f"[!] Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
