"""
Command-line interface.

    python main.py resolve service:session --namespace myapp.services
    python main.py known service --namespace myapp.services
"""

import argparse
import importlib
import sys
from typing import List, Optional

from .application import Application
from .core.exceptions import OwnerError
from .core.logging_config import setup_logging, get_logger
from .config.settings import get_settings
from .resolvers import NamespaceResolver

logger = get_logger(__name__)


def build_application(namespace: str) -> Application:
    """
    Build an application resolving from a module.

    Args:
        namespace: Dotted module path

    Returns:
        Application whose resolver is a NamespaceResolver over the module

    Raises:
        ImportError: If the module cannot be imported
    """
    module = importlib.import_module(namespace)
    return Application(resolver=NamespaceResolver(module))


def resolve_command(application: Application, full_name: str) -> bool:
    """Print what a full name resolves to; False if nothing does."""
    resolved = application.resolve_registration(full_name)
    if resolved is None:
        logger.error(f"Nothing resolves '{full_name}'")
        return False

    registry = application.registry
    print(f"{registry.normalize(full_name)} -> {registry.describe(full_name)}")
    return True


def known_command(application: Application, type_: str) -> bool:
    """Print every full name known for a type; False if there are none."""
    known = sorted(application.registry.known_for_type(type_))
    if not known:
        logger.warning(f"No '{type_}' entries found")
        return False

    for full_name in known:
        print(full_name)
    return True


def create_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description='Inspect how full names resolve against a namespace module',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s resolve service:user-session --namespace myapp.services
  %(prog)s known route --namespace myapp.routes
        """
    )
    parser.add_argument(
        '--namespace',
        default=settings.resolver_namespace,
        help='Module holding the classes (default: RESOLVER_NAMESPACE)'
    )
    parser.add_argument(
        '--log-level',
        default=settings.log_level,
        help=f'Logging level (default: {settings.log_level})'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    resolve_parser = subparsers.add_parser('resolve', help='Resolve a full name')
    resolve_parser.add_argument('full_name', help="Full name, e.g. 'service:session'")

    known_parser = subparsers.add_parser('known', help='List full names known for a type')
    known_parser.add_argument('type', help="Type, e.g. 'service'")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, format_string=get_settings().log_format)

    if not args.namespace:
        logger.error("No namespace given (use --namespace or set RESOLVER_NAMESPACE)")
        return 1

    try:
        application = build_application(args.namespace)
    except ImportError as e:
        logger.error(f"Cannot import namespace '{args.namespace}': {e}")
        return 1

    try:
        if args.command == 'resolve':
            ok = resolve_command(application, args.full_name)
        else:
            ok = known_command(application, args.type)
    except OwnerError as e:
        logger.error(str(e))
        return 1

    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
