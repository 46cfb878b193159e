"""Local-file fetcher serving the same callback contract as the HTTP one."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from account_totals.domain.errors import FetchError
from account_totals.domain.repositories import FetchCallback

logger = logging.getLogger(__name__)


class JsonFileFetcher:
    async def fetch(self, url: str, callback: FetchCallback) -> None:
        path = Path(url)
        logger.debug("Reading %s", path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            error = FetchError(url, exc.strerror or str(exc))
        except json.JSONDecodeError as exc:
            error = FetchError(url, f"invalid JSON ({exc.msg} at line {exc.lineno})")
        except ValueError as exc:
            error = FetchError(url, f"unreadable JSON ({exc})")
        else:
            callback(None, data)
            return
        logger.warning("%s", error)
        callback(error, None)
