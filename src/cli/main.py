"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Wiring of application services through the dependency object parent
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from src._package import CLI_NAME, __version__
from src.article.kata import KATA_STEPS
from src.article.outline import load_article
from src.article.validator import ArticleValidator
from src.cli.formatters import format_output
from src.config.manager import ConfigurationManager
from src.domain.core.exceptions import ArticleStructureError, DomainException
from src.infrastructure.di.object_parent import DependencyObjectParent
from src.infrastructure.exceptions import InfrastructureError
from src.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="Patterns for Testable Code - article checks and the account import example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s article outline                   # Show the article structure
  %(prog)s article check --assets            # Validate structure and images
  %(prog)s kata --format list                # Print the kata steps
  %(prog)s accounts import accounts.json     # Import accounts through the composite
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table', 'list'],
                        default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Article resource
    article_parser = subparsers.add_parser('article', help='Inspect the patterns article')
    article_subparsers = article_parser.add_subparsers(dest='action', help='Article actions')

    article_outline = article_subparsers.add_parser('outline', help='Show the article structure')
    article_outline.add_argument('--file', help='Article path (default: from configuration)')

    article_check = article_subparsers.add_parser('check', help='Validate the article structure')
    article_check.add_argument('--file', help='Article path (default: from configuration)')
    article_check.add_argument('--assets', action='store_true',
                               help='Also check that referenced images exist')

    # Kata resource
    subparsers.add_parser('kata', help='Show the kata exercise')

    # Accounts resource
    accounts_parser = subparsers.add_parser('accounts', help='Run the account import example')
    accounts_subparsers = accounts_parser.add_subparsers(dest='action', help='Account actions')

    accounts_import = accounts_subparsers.add_parser('import', help='Import accounts from a file')
    accounts_import.add_argument('file', help='JSON or YAML file with a list of accounts')
    accounts_import.add_argument('--config', default=argparse.SUPPRESS,
                                 help='Configuration file path (JSON or YAML)')

    accounts_list = accounts_subparsers.add_parser('list', help='List stored accounts')
    accounts_list.add_argument('--config', default=argparse.SUPPRESS,
                               help='Configuration file path (JSON or YAML)')

    return parser.parse_args(argv)


def _article_path(args: argparse.Namespace, config: Dict[str, Any]) -> str:
    return args.file or config["ARTICLE_CONFIG"]["path"]


def execute_command(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Route a parsed command to its handler and return the result."""
    if args.resource == 'kata':
        return {"title": "Kata", "steps": list(KATA_STEPS)}

    if args.resource == 'article':
        path = _article_path(args, config)
        outline = load_article(path)
        if args.action == 'outline':
            return outline.to_dict()
        validator = ArticleValidator()
        validator.check(outline)
        if args.assets:
            validator.check_assets(outline, os.path.dirname(os.path.abspath(path)))
        return {"article": path, "valid": True, "violations": []}

    parent = DependencyObjectParent(config)
    service = parent.create_account_import_application_service()
    if args.action == 'import':
        summary = service.import_file(args.file)
        result = summary.to_dict()
        result["accounts"] = [a.to_dict() for a in service.list_accounts()]
        return result
    return {"accounts": [a.to_dict() for a in service.list_accounts()]}


def _emit(args: argparse.Namespace, result: Any) -> None:
    formatted_output = format_output(result, args.format)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(formatted_output)
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(formatted_output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.")
        return 1
    if args.resource != 'kata' and not args.action:
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
        return 1

    try:
        config = ConfigurationManager(args.config).get_config()
    except DomainException as e:
        print(f"Error: {e}")
        return 1

    if args.log_level:
        config["LOGGING_CONFIG"]["level"] = args.log_level
    setup_logging(config)
    logger = get_logger(__name__)

    exit_code = 0
    try:
        try:
            result = execute_command(args, config)
        except ArticleStructureError as e:
            logger.error("Article check failed", violations=e.violations)
            result = {"valid": False, "violations": e.violations}
            exit_code = 1
        _emit(args, result)
    except (DomainException, InfrastructureError, OSError) as e:
        logger.error(f"Command failed: {e}")
        if not args.quiet:
            print(f"Error: {e}")
        return 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
