from __future__ import annotations

import json
import logging


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging once for the experiment scripts."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_event(logger: logging.Logger, event: str, **payload: object) -> None:
    """Emit a one-line JSON record, e.g. a schedule run summary."""

    body = {"event": event, **payload}
    logger.info(json.dumps(body, sort_keys=True, default=str))
