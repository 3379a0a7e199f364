"""Translation of engine exceptions into HTTP errors."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from ..errors import EvacuationError, StoreUnavailableError


@contextmanager
def http_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except EvacuationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.to_dict()) from exc
    except StoreUnavailableError as exc:
        logging.error(f"State store unavailable during {operation}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "State store unavailable", "operation": operation, "reason": exc.reason},
        ) from exc
