import argparse
import os
from typing import List, Optional, Sequence

from profilemutex.core.exclusion_group import parse_labels

ACTIVE_PROFILES_ENV = "PROFILEMUTEX_ACTIVE_PROFILES"


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="profilemutex",
        description=(
            "Checks that no more than one profile of each mutually exclusive "
            "profile set is active, or exactly one where a set requires it."
        ),
        epilog=(
            "Examples:\n"
            "  profilemutex --config profilemutex.toml -P dev,postgres\n"
            "  profilemutex -P dev -P postgres --verbose\n"
            f"  {ACTIVE_PROFILES_ENV}=prod,mysql profilemutex\n"
            "  profilemutex --config profilemutex.toml --config-validate\n"
            "  profilemutex --config profilemutex.toml --config-init\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-P",
        "--activate-profiles",
        dest="activate_profiles",
        action="append",
        default=[],
        metavar="PROFILES",
        help="Comma-separated list of active profiles (may be repeated).",
    )
    parser.add_argument(
        "--active-profiles",
        nargs="*",
        default=None,
        metavar="PROFILE",
        help="Active profiles as separate arguments.",
    )

    # Configuration controls
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to the rule configuration file (default: ./profilemutex.toml)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept profile sets that do not name any profile.",
    )
    parser.add_argument(
        "--config-validate",
        action="store_true",
        help="Validate the configuration file and exit.",
    )
    parser.add_argument(
        "--config-init",
        action="store_true",
        help="Write an example configuration file and exit.",
    )

    # Logging
    parser.add_argument("--verbose", action="store_true", help="Enables verbose logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Path to the log file.")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured console output.",
    )

    args = parser.parse_args(argv)

    if args.config_validate and args.config_init:
        parser.error("Cannot use both --config-validate and --config-init")

    return args


def collect_active_profiles(args: argparse.Namespace) -> List[str]:
    """Merge the profiles given on the command line, falling back to the environment."""
    raw_values: List[str] = list(args.activate_profiles)
    if args.active_profiles:
        raw_values.extend(args.active_profiles)
    if not raw_values and args.active_profiles is None:
        env_value = os.environ.get(ACTIVE_PROFILES_ENV)
        if env_value:
            raw_values.append(env_value)

    profiles: List[str] = []
    for raw in raw_values:
        for label in parse_labels(raw):
            if label not in profiles:
                profiles.append(label)
    return profiles
