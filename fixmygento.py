#!/usr/bin/env python3
"""
fixmygento
Tries orderings of the Magento maintenance commands until one of them works
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from config import FixConfig, default_config_path
from services.attempt_logger import AttemptLogger
from services.audio_player import AmbientAudioPlayer
from services.command_runner import CommandRunner
from services.container_command_builder import ContainerCommandBuilder
from services.errors import LoggingError, TotalExhaustionError
from services.execution import CommandExecutionService
from services.notification_settings import NotificationSettings
from services.notification_sender import NotificationSender
from services.strategy_executor import StrategyExecutor
from services.strategy_search import StrategySearch

logger = logging.getLogger("fixmygento")


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(message)s',
        datefmt='%Y/%m/%d %H:%M:%S',
        stream=sys.stderr
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='fixmygento',
        description="Run cache:flush, setup:di:compile, setup:upgrade and indexer:reindex "
                    "in every known order until one works"
    )
    parser.add_argument('--config', default=default_config_path(),
                        help='Settings file (default: ~/.fixmygento/config.yaml)')
    parser.add_argument('--no-audio', action='store_true', help='Do not play the background loop')
    parser.add_argument('--history', type=int, metavar='N', help='Show the last N attempts and exit')
    parser.add_argument('--print-config', action='store_true', help='Print a settings template and exit')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser.parse_args(argv)


def current_directory() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        logger.warning("Warning: Failed to get current working directory: %s", e)
        return Path('.')


def build_search(config: FixConfig, attempt_logger: AttemptLogger) -> StrategySearch:
    """Wire the command runner, strategy executor and driver from settings"""
    command_builder = ContainerCommandBuilder(
        compose_command=config.compose_command,
        service=config.service,
        cli=config.cli
    )
    runner = CommandRunner(command_builder, CommandExecutionService())
    return StrategySearch(StrategyExecutor(runner), attempt_logger)


def show_history(attempt_logger: AttemptLogger, limit: int) -> int:
    try:
        records = attempt_logger.read_attempts(limit)
    except LoggingError as e:
        logger.error("Error: %s", e)
        return 1

    if not records:
        print(f"No attempts logged in {attempt_logger.log_file}")
    for record in records:
        print(record.to_log_line())
    return 0


def print_config_template(config: FixConfig) -> int:
    print(yaml.dump(config.get_default_config(), default_flow_style=False, indent=2, sort_keys=False), end='')
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    config = FixConfig(args.config)
    working_directory = current_directory()
    attempt_logger = AttemptLogger(config.log_file, working_directory)

    if args.history is not None:
        return show_history(attempt_logger, args.history)

    if args.print_config:
        return print_config_template(config)

    logger.info("Attempting to fix your 'gento... 🧑‍🔧")
    for line in config.summary():
        logger.debug(line)

    if config.audio_enabled and not args.no_audio:
        AmbientAudioPlayer(config.audio_file, config.audio_player).start()

    notifier = NotificationSender(
        NotificationSettings(config.notification_config).providers()
    )

    search = build_search(config, attempt_logger)

    try:
        result = search.run()
    except TotalExhaustionError as e:
        notifier.send_search_exhausted(
            e.attempts, str(working_directory), str(e.last_error) if e.last_error else None
        )
        logger.critical("I'm sorry, none of the strategies worked. 🙁")
        return 1

    notifier.send_search_success(result.strategy.name(), result.attempts, str(working_directory))
    return 0


if __name__ == '__main__':
    sys.exit(main())
