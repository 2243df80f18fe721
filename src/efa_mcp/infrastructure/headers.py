from __future__ import annotations

_USER_AGENT = "efa-mcp/0.1 (+https://www.efa-bw.de)"


def make_headers(language: str = "de") -> dict[str, str]:
    """Return the request headers sent with every EFA call.

    The rtMonitor endpoints answer in XML unless asked for JSON, so both the
    Accept header and the outputFormat query parameter request it.
    """
    return {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": f"{language},en;q=0.7",
        "Cache-Control": "no-cache",
        "User-Agent": _USER_AGENT,
    }
