"""A small castle treasure hunt, played at the terminal."""

from .config import Config
from .console import run
from .logging import configure_logging, get_logger
from .session import CastleSession

__all__ = ["main", "run", "CastleSession", "Config"]


def main() -> None:
    """Entry point for the castle adventure."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info("application_starting", log_level=config.log_level)

    run(CastleSession.new())
