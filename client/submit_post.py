"""Simple form client for manual testing."""

from __future__ import annotations

import argparse
import logging
import re

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/create"

_ERROR_RE = re.compile(r'<p class="error-message">(.*?)</p>', re.S)


def submit(url: str, fields: dict[str, str], timeout: float) -> int:
    """Post the form and report the outcome. Returns a process exit code."""

    logger = logging.getLogger("submit_post")

    with httpx.Client(follow_redirects=False, timeout=timeout) as client:
        response = client.post(url, data=fields)

    if response.status_code == 303:
        logger.info("Post created; redirected to %s", response.headers.get("location"))
        return 0

    messages = _ERROR_RE.findall(response.text)
    if not messages:
        logger.error("Unexpected response %d", response.status_code)
        return 1

    for message in messages:
        logger.error("Form error: %s", message.strip())
    return 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Submit a post through the create form.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Form URL (default: %(default)s)")
    parser.add_argument("--title", help="Post title.")
    parser.add_argument("--content", help="Post body.")
    parser.add_argument("--author", help="Post author.")
    parser.add_argument("--cover", help="Cover image URL.")
    parser.add_argument(
        "--timeout", type=float, default=10.0, help="Seconds to wait for the response."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    fields = {
        name: getattr(args, name)
        for name in ("title", "content", "author", "cover")
        if getattr(args, name) is not None
    }
    raise SystemExit(submit(args.url, fields, args.timeout))


if __name__ == "__main__":  # pragma: no cover
    main()
