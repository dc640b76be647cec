import logging
import sys
from typing import Iterable, Optional, Sequence

from profilemutex.cli.parser import collect_active_profiles, parse_arguments
from profilemutex.config import (
    ConfigError,
    ConfigStorage,
    RuleViolationError,
)
from profilemutex.config.defaults import DEFAULT_CONFIG_TOML
from profilemutex.config.loader import RuleConfigLoader
from profilemutex.core.rule_set import EvaluationObserver, EvaluationResult, ExclusionRuleSet
from profilemutex.services.logging.logging_service import setup_logging
from profilemutex.services.logging.observer import LoggingObserver
from profilemutex.utils.color_support import color_support

EXIT_OK = 0
EXIT_FAILURE = 1


def enforce(
    rule_set: ExclusionRuleSet,
    active_profiles: Iterable[str],
    observer: Optional[EvaluationObserver] = None,
) -> EvaluationResult:
    """Evaluate ``rule_set`` and raise :class:`RuleViolationError` on violation."""
    result = rule_set.evaluate(active_profiles, observer=observer)
    if not result.satisfied:
        raise RuleViolationError(result)
    return result


def _init_config(storage: ConfigStorage) -> int:
    backup_path = storage.backup_existing_config()
    if backup_path:
        logging.info("Existing configuration backed up to %s", backup_path)
    try:
        storage.write_default(DEFAULT_CONFIG_TOML)
    except ConfigError as exc:
        logging.error("Failed to write configuration: %s", exc)
        return EXIT_FAILURE
    print(f"Example configuration written to {storage.path}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)

    setup_logging(args.verbose, args.log_file, force_color=False if args.no_color else None)

    loader = RuleConfigLoader(
        args.config, reject_empty_groups=False if args.lenient else None
    )

    if args.config_init:
        return _init_config(loader.storage)

    try:
        rule_set = loader.load()
    except ConfigError as exc:
        logging.error("Failed to load configuration %s: %s", loader.config_path, exc)
        if args.config_validate:
            print("Configuration validation failed.")
        return EXIT_FAILURE

    if args.config_validate:
        print(f"Configuration is valid ({len(rule_set)} profile set(s)).")
        return EXIT_OK

    active_profiles = collect_active_profiles(args)
    logging.debug("Configuration file: %s", loader.config_path)

    try:
        enforce(rule_set, active_profiles, observer=LoggingObserver())
    except RuleViolationError as exc:
        logging.error("Mutually exclusive profile rule failed")
        print(color_support.error(str(exc), stream=sys.stdout))
        return EXIT_FAILURE

    print(
        color_support.success("Mutually exclusive profile rules satisfied.", stream=sys.stdout)
    )
    return EXIT_OK


def run() -> None:
    sys.exit(main())
