"""Command line entry point for the DoH client."""
import sys
import argparse
import logging

from dohclient.models import Answer


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="dohclient",
        description="Resolve a domain name over DNS-over-HTTPS",
    )
    parser.add_argument("name", nargs="?", default="api.github.com", help="domain name to resolve")
    parser.add_argument("-t", "--type", help="record type, e.g. A, AAAA, SRV or TYPE65")
    parser.add_argument("-p", "--provider", help="google, cloudflare or an endpoint URL")
    parser.add_argument("--cd", action="store_true", help="disable DNSSEC checking upstream")
    parser.add_argument("--do", action="store_true", help="request DNSSEC records")
    return parser


def format_answer(answer: Answer) -> str:
    """Format one answer for console output."""
    return f"type: {answer.record_type.label} name: {answer.name} ttl: {answer.ttl} data: {answer.data}"


def main(argv=None) -> int:
    """Main entry point."""
    from dohclient.config import Config, ConfigurationError
    from dohclient.models import Provider, RecordType, ResolveOptions
    from dohclient.services import DoHClient, ResolveError

    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.provider:
            config.provider_name = args.provider
            config.custom_url = None
            Provider.from_name(args.provider)
        if args.type:
            config.record_type = RecordType.parse(args.type)
        provider = config.provider()
    except (ConfigurationError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    options = ResolveOptions(
        type=config.record_type,
        checking_disabled=args.cd,
        dnssec_ok=args.do,
    )

    with DoHClient(provider=provider, timeout=config.timeout) as client:
        try:
            response = client.resolve(args.name, options)
        except ResolveError as e:
            logger.error(f"Failed to resolve {args.name}: {e}")
            return 1

    if response.response_code.is_error:
        print(f"status: {response.response_code.value}", file=sys.stderr)

    for answer in response.answers:
        print(format_answer(answer))
    return 0


if __name__ == '__main__':
    sys.exit(main())
