"""Main entry point for the Canvas group creator"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config.settings import Settings
from .models.events import RunResult
from .tools.api_clients.canvas import CanvasClient
from .utils.exceptions import CanvasGroupsException, ConfigurationError, RosterNotFoundError
from .utils.logging import setup_logging
from .utils.progress_logger import progress_logger
from .workflow.orchestrator import GroupCreationOrchestrator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='canvas-groups',
        description='Create one Canvas group per project listed in a markdown roster.'
    )
    parser.add_argument('roster', nargs='?', help='markdown file listing projects (default: $ROSTER_PATH)')
    parser.add_argument('--category', help='group category name (default: $GROUP_CATEGORY_NAME)')
    parser.add_argument('--delay', type=float, help='seconds to pause between projects')
    parser.add_argument('--json', dest='json_path', help='write the results to this JSON file')
    parser.add_argument('--skip-connection-check', action='store_true',
                        help='do not probe the API before starting')
    parser.add_argument('--log-level', help='diagnostic log level (default: $LOG_LEVEL)')
    return parser


async def run_group_creation(settings: Settings, check_connection: bool = True) -> RunResult:
    """Validate preconditions, then run the orchestrator against the real Canvas API"""
    settings.validate()
    
    if not Path(settings.roster_path).is_file():
        raise RosterNotFoundError(settings.roster_path)
    
    async with CanvasClient.from_settings(settings) as client:
        orchestrator = GroupCreationOrchestrator(settings, client)
        result = await orchestrator.run(check_connection=check_connection)
        logger.debug(f"Metrics: {json.dumps(client.metrics.get_summary(), indent=2)}")
    
    return result


def report_configuration_errors(error: ConfigurationError) -> int:
    progress_logger.log_error("Configuration errors:", error.errors)
    print("\nPlease check your .env file or environment variables.", file=sys.stderr)
    return 1


def write_results(result: RunResult, path: str):
    Path(path).write_text(json.dumps(result.to_dict(), indent=2, default=str), encoding='utf-8')


def main(argv: Optional[List[str]] = None) -> int:
    """Run the tool and return the process exit status"""
    args = build_parser().parse_args(argv)
    
    try:
        settings = Settings.from_env().with_overrides(
            roster_path=args.roster,
            category_name=args.category,
            request_delay=args.delay,
            log_level=args.log_level.upper() if args.log_level else None
        )
    except ConfigurationError as e:
        return report_configuration_errors(e)
    
    setup_logging(settings.log_level, settings.log_file)
    
    try:
        result = asyncio.run(run_group_creation(settings, not args.skip_connection_check))
    except ConfigurationError as e:
        return report_configuration_errors(e)
    except RosterNotFoundError as e:
        progress_logger.log_error(str(e))
        print("Please make sure the roster file exists.", file=sys.stderr)
        return 1
    except CanvasGroupsException as e:
        progress_logger.log_error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    
    if args.json_path:
        write_results(result, args.json_path)
    
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
