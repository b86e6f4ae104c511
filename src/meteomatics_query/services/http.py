"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with the package User-Agent.
Retries are switched off: a failed request surfaces to the caller on the
first attempt. An optional default timeout is injected into every request.

Usage::

    from meteomatics_query.services.http import session

    resp = session.get("https://api.meteomatics.com/...", auth=("user", "pass"))
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: No retries, and never raise on status: callers get the raw response.
NO_RETRY = Retry(total=0, read=False, raise_on_status=False)

USER_AGENT = "meteomatics-query/0.1"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with an adapter mounted.

    Args:
        retry: Retry strategy for the adapter (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request. ``None`` leaves
            requests without a timeout.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
