from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator

import httpx
from pydantic import ValidationError

from ..core.errors import ApiError

logger = logging.getLogger(__name__)


@contextmanager
def exit_on_api_error() -> Iterator[None]:
    """Log a failed request and terminate the process with status 1.

    Covers API errors, transport errors, undecodable or malformed bodies and
    invalid VULNCHECK_* settings.
    """
    try:
        yield
    except ApiError as e:
        logger.critical("API request failed: %s", e)
        raise SystemExit(1) from e
    except httpx.HTTPError as e:
        logger.critical("HTTP transport error: %s", e)
        raise SystemExit(1) from e
    except ValidationError as e:
        logger.critical("Invalid configuration or response: %s", e)
        raise SystemExit(1) from e
    except (ValueError, TypeError) as e:
        logger.critical("Failed to decode response: %s", e)
        raise SystemExit(1) from e


def print_json(data: Any) -> None:
    try:
        rendered = json.dumps(data, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        logger.critical("Failed to generate JSON: %s", e)
        raise SystemExit(1) from e
    print(rendered)


def print_text(body: str) -> None:
    print(body)
