import configparser
from pathlib import Path
from typing import NamedTuple, Optional


class LoggingSettings(NamedTuple):
    verbose: bool
    log_file: Optional[Path]


def parse_config(log, config_file: Path):
    config = configparser.ConfigParser()
    if config_file:
        if config_file.is_file():
            log.debug(
                "parse-config",
                config_file=config_file,
            )
            config.read(config_file)
        else:
            log.debug(
                "parse-config-not-found",
                config_file=config_file,
            )

    return config


def logging_settings(config: configparser.ConfigParser, verbose=False):
    """Command line verbosity wins over the config file."""
    verbose = verbose or config.getboolean(
        "logging", "verbose", fallback=False
    )
    log_file = config.get("logging", "logfile", fallback=None)
    return LoggingSettings(
        verbose=verbose,
        log_file=Path(log_file) if log_file else None,
    )
