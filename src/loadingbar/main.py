import argparse
import os

import yaml
from dotenv import load_dotenv

from loadingbar.exceptions import ConfigurationError
from loadingbar.logger.logger_config import logger
from loadingbar.utils.progress_bar import (
    DEFAULT_DURATION,
    DEFAULT_LENGTH,
    DEFAULT_PREFIX,
    DEFAULT_PROGRESS_CHAR,
    create_with_config,
)

CONFIG_ENV_VAR = "LOADINGBAR_CONFIG"
CONFIG_SECTION = "loading_bar"

DEFAULTS = {
    "duration": DEFAULT_DURATION,
    "progress_char": DEFAULT_PROGRESS_CHAR,
    "length": DEFAULT_LENGTH,
    "prefix": DEFAULT_PREFIX,
}

SETTING_TYPES = {
    "duration": (int, float),
    "progress_char": str,
    "length": int,
    "prefix": str,
}


def load_configuration(config_path=None):
    """
    Load the loading bar settings from a YAML file.

    Args:
        config_path (str, optional): Path to the YAML file. Falls back to the
            LOADINGBAR_CONFIG environment variable, then to the built-in defaults.

    Returns:
        dict: The built-in defaults updated with the file's ``loading_bar`` section.
    """
    settings = dict(DEFAULTS)
    config_path = config_path or os.getenv(CONFIG_ENV_VAR)
    if not config_path:
        return settings

    try:
        with open(config_path, "r") as file:
            configuration = yaml.safe_load(file) or {}
    except OSError as e:
        raise ConfigurationError(f"Could not read config file '{config_path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in '{config_path}': {e}") from e

    if not isinstance(configuration, dict):
        raise ConfigurationError(f"Config file '{config_path}' must contain a mapping")

    section = configuration.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' in '{config_path}' must be a mapping")

    unknown = sorted(set(section) - set(DEFAULTS))
    if unknown:
        raise ConfigurationError(f"Unknown settings in '{config_path}': {', '.join(unknown)}")

    if section.get("prefix", "") is None:
        section["prefix"] = ""

    for key, expected in SETTING_TYPES.items():
        value = section.get(key, settings[key])
        # bool is an int subclass but never a valid size
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigurationError(
                f"'{key}' in '{config_path}' has the wrong type: {type(value).__name__}"
            )

    settings.update(section)
    logger.debug(f"Loaded settings from {config_path}")
    return settings


def build_parser():
    parser = argparse.ArgumentParser(description="Show a loading bar that fills over a fixed duration")

    parser.add_argument("--duration", "-d", type=float, help=f"Seconds the bar takes to fill (default: {DEFAULT_DURATION})")
    parser.add_argument("--char", "-c", dest="progress_char", type=str, help=f"Fill character (default: '{DEFAULT_PROGRESS_CHAR}')")
    parser.add_argument("--length", "-l", type=int, help=f"Bar width in characters (default: {DEFAULT_LENGTH})")
    parser.add_argument("--prefix", "-p", type=str, help="Text printed before the bar")
    parser.add_argument("--config", type=str, help=f"YAML config file (default: ${CONFIG_ENV_VAR})")
    parser.add_argument(
        "--log-level",
        "-ll",
        default="INFO",
        choices=["INFO", "DEBUG", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)",
    )
    return parser


def main(argv=None):
    load_dotenv()
    args = build_parser().parse_args(argv)
    logger.setLevel(level=args.log_level)

    try:
        settings = load_configuration(args.config)
        for key in DEFAULTS:
            value = getattr(args, key)
            if value is not None:
                settings[key] = value

        if len(settings["progress_char"]) != 1:
            raise ConfigurationError(f"Fill character must be a single character, got '{settings['progress_char']}'")
        if settings["length"] < 0:
            raise ConfigurationError(f"Bar length must not be negative, got {settings['length']}")
        if settings["duration"] < 0:
            raise ConfigurationError(f"Duration must not be negative, got {settings['duration']}")

        bar = create_with_config(
            duration=settings["duration"],
            progress_char=settings["progress_char"],
            length=settings["length"],
            prefix=settings["prefix"],
        )
        bar.render()
        logger.success("Done!")
        return 0

    except KeyboardInterrupt:
        logger.info("loadingbar interrupted by user.")
        return 130
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except ZeroDivisionError:
        logger.error("Bar length must be at least 1")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
