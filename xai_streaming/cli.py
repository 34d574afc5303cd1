"""Command line entry point: stream one prompt to stdout.

Usage::

    python -m xai_streaming [--model ID] [--system TEXT] [--retries N] [--json] PROMPT...

The prompt is read from stdin when no positional words are given. Text deltas
are written to stdout as they arrive; the final usage report goes to stderr.
Credentials and defaults come from the configuration layer (``XAI_API_KEY``,
``XAI_MODEL``, ``XAI_STREAMING_CONFIG_FILE``) unless given as flags.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import List, Optional, Sequence

from .base.errors import ProviderError
from .base.logging import configure_logger
from .base.models import Message
from .base.resilience import with_retry
from .base.streaming import TextDelta, UsageTotal
from .config import ConfigError
from .xai import XAIProvider

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xai-stream", description="Stream a chat completion from the xAI API")
    p.add_argument("prompt", nargs="*", help="prompt words (stdin when omitted)")
    p.add_argument("--model", default=None, help="model id (unknown ids fall back to the default)")
    p.add_argument("--system", default=DEFAULT_SYSTEM_PROMPT, help="system prompt")
    p.add_argument("--api-key", default=None, help="bearer key (default: XAI_API_KEY)")
    p.add_argument("--base-url", default=None)
    p.add_argument("--retries", type=int, default=None, help="total attempts; default from config")
    p.add_argument("--json", action="store_true", help="print one JSON object per event")
    p.add_argument("--log-level", default="WARNING")
    return p


def _read_prompt(words: List[str]) -> str:
    if words:
        return " ".join(words)
    return sys.stdin.read().strip()


def main(argv: Optional[Sequence[str]] = None, *, provider: Optional[XAIProvider] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(level=args.log_level)
    prompt = _read_prompt(args.prompt)
    if not prompt:
        print("error: empty prompt", file=sys.stderr)
        return 2

    try:
        if provider is None:
            provider = XAIProvider.from_config(
                {"api_key": args.api_key, "model": args.model, "base_url": args.base_url}
            )
        retry_cfg = provider.build_retry_config(phase="cli")
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.retries is not None:
        retry_cfg = dataclasses.replace(retry_cfg, max_attempts=max(1, args.retries))
    stream = with_retry(provider.create_message, retry_cfg)

    usage: Optional[UsageTotal] = None
    try:
        for event in stream(args.system, [Message(role="user", content=prompt)]):
            if args.json:
                print(json.dumps(dataclasses.asdict(event)), flush=True)
            elif isinstance(event, TextDelta):
                sys.stdout.write(event.text)
                sys.stdout.flush()
            if isinstance(event, UsageTotal):
                usage = event
    except ProviderError as e:
        if not args.json:
            sys.stdout.write("\n")
        print(f"error: {e}", file=sys.stderr)
        return 1
    if not args.json:
        sys.stdout.write("\n")
    if usage is not None:
        print(f"usage: input={usage.input_tokens} output={usage.output_tokens}", file=sys.stderr)
    return 0


__all__ = ["build_parser", "main"]
