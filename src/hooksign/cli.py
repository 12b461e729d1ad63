"""hooksign CLI - sign payloads and check webhook signature headers."""

import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from hooksign.common.logging import setup_logging
from hooksign.common.settings import Settings
from hooksign.signing.header import serialize_signature_header
from hooksign.signing.hmac import build_message, create_signature, load_payload
from hooksign.signing.validator import now_millis, validate_signature

console = Console()


def _load_payload(value: str) -> Any:
    """Read a payload from a JSON string or a path to a JSON file."""
    try:
        is_file = Path(value).is_file()
    except OSError:
        is_file = False
    raw = Path(value).read_text() if is_file else value
    try:
        return load_payload(raw)
    except ValueError as exc:
        console.print(f"[red]Payload is not valid JSON: {exc}[/red]")
        sys.exit(1)


def _resolve_secret(secret: str | None) -> str:
    if secret:
        return secret
    configured = Settings().secret_value
    if not configured:
        console.print("[red]No secret given and HOOKSIGN_WEBHOOK_SECRET is not set[/red]")
        sys.exit(1)
    return configured


@click.group()
def cli() -> None:
    """hooksign CLI - Build and verify webhook signatures."""
    settings = Settings()
    setup_logging(level=settings.log_level, json_logs=settings.log_json)


@cli.command("sign")
@click.option("--payload", "-p", required=True, help="Payload JSON string or file path")
@click.option("--timestamp", "-t", type=int, help="Epoch milliseconds (default: now)")
@click.option("--secret", "-s", help="Shared secret (default: HOOKSIGN_WEBHOOK_SECRET)")
@click.option("--show-message", is_flag=True, help="Also print the canonical signed message")
def sign_cmd(payload: str, timestamp: int | None, secret: str | None, show_message: bool) -> None:
    """Sign a payload and print the signature header."""
    data = _load_payload(payload)
    key = _resolve_secret(secret)
    ts = timestamp if timestamp is not None else now_millis()

    signature = create_signature(ts, data, key)

    if show_message:
        console.print(f"Message: {build_message(ts, data)}", markup=False, highlight=False, soft_wrap=True)
    console.print(f"Signature: {signature}", highlight=False, soft_wrap=True)
    console.print(f"Header: {serialize_signature_header(ts, signature)}", highlight=False, soft_wrap=True)


@cli.command("verify")
@click.option("--payload", "-p", required=True, help="Payload JSON string or file path")
@click.option("--header", "-H", "header", required=True, help="Signature header value")
@click.option("--secret", "-s", help="Shared secret (default: HOOKSIGN_WEBHOOK_SECRET)")
@click.option("--valid-for", type=int, help="Tolerance in seconds (default: settings)")
@click.option("--now", type=int, help="Verification time in epoch milliseconds")
def verify_cmd(
    payload: str,
    header: str,
    secret: str | None,
    valid_for: int | None,
    now: int | None,
) -> None:
    """Verify a signature header against a payload."""
    data = _load_payload(payload)
    key = _resolve_secret(secret)
    if valid_for is None:
        valid_for = Settings().valid_for_seconds

    clock = (lambda: now) if now is not None else now_millis
    result = validate_signature(header, data, key, valid_for_seconds=valid_for, clock=clock)

    if result.is_valid:
        console.print("[green]✓ Signature is valid[/green]")
    else:
        reason = result.reason.value if result.reason else "unknown"
        console.print(f"[red]✗ {reason}[/red]")
        sys.exit(1)


def main() -> None:
    """CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
