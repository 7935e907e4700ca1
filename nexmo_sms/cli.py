"""Click CLI for account lookups and sending messages."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click
from pydantic import ValidationError

from nexmo_sms.account import Account
from nexmo_sms.client import GatewayClient
from nexmo_sms.config import ClientSettings
from nexmo_sms.errors import GatewayError
from nexmo_sms.messaging.message import Message
from nexmo_sms.messaging.overview import format_overview
from nexmo_sms.rest.builder import DEFAULT_BASE_URL, RequestBuilder

_T = TypeVar("_T")
_C = TypeVar("_C", bound=GatewayClient)


def _run(call: Callable[[], _T]) -> _T:
    try:
        return call()
    except GatewayError as exc:
        raise click.ClickException(str(exc)) from exc


def _client(ctx: click.Context, cls: type[_C]) -> _C:
    opts: dict[str, Any] = ctx.obj
    settings: ClientSettings = opts["settings"]
    transport = opts.get("transport")
    if transport is None:
        return cls.from_settings(settings)
    return cls(
        settings.api_key,
        settings.api_secret,
        transport=transport,
        builder=RequestBuilder(base_url=settings.base_url),
    )


@click.group()
@click.option("--key", envvar="NEXMO_API_KEY", required=True, help="Account API key.")
@click.option("--secret", envvar="NEXMO_API_SECRET", required=True, help="Account API secret.")
@click.option("--base-url", envvar="NEXMO_BASE_URL", default=DEFAULT_BASE_URL, help="REST base URL.")
@click.option(
    "--timeout", envvar="NEXMO_TIMEOUT", type=float, default=30.0,
    help="Request timeout in seconds.",
)
@click.option(
    "--verify-tls/--no-verify-tls", envvar="NEXMO_VERIFY_TLS", default=True,
    help="Verify the gateway's TLS certificate.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    key: str,
    secret: str,
    base_url: str,
    timeout: float,
    verify_tls: bool,
    verbose: bool,
) -> None:
    """Nexmo SMS gateway CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        # httpx logs full request URLs, which embed the credentials
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    try:
        settings = ClientSettings(
            api_key=key,
            api_secret=secret,
            base_url=base_url,
            timeout=timeout,
            verify_tls=verify_tls,
        )
    except ValidationError as exc:
        raise click.UsageError(f"Invalid client settings: {exc}") from exc
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def balance(ctx: click.Context) -> None:
    """Show the account balance."""
    with _client(ctx, Account) as account:
        click.echo(str(_run(account.balance)))


@cli.command()
@click.argument("country_code")
@click.pass_context
def pricing(ctx: click.Context, country_code: str) -> None:
    """Show the outbound SMS price for a country."""
    with _client(ctx, Account) as account:
        click.echo(str(_run(lambda: account.sms_pricing(country_code))))


@cli.command("dialing-code")
@click.argument("country_code")
@click.pass_context
def dialing_code(ctx: click.Context, country_code: str) -> None:
    """Show the international dialing prefix for a country."""
    with _client(ctx, Account) as account:
        click.echo(_run(lambda: account.dialing_code(country_code)))


@cli.group("numbers")
def numbers_group() -> None:
    """Manage account numbers."""


@numbers_group.command("list")
@click.pass_context
def numbers_list(ctx: click.Context) -> None:
    """List numbers owned by the account."""
    with _client(ctx, Account) as account:
        click.echo(json.dumps(_run(account.numbers_list), indent=2))


@numbers_group.command("search")
@click.argument("country_code")
@click.option("--pattern", default="", help="Digits the number should contain.")
@click.pass_context
def numbers_search(ctx: click.Context, country_code: str, pattern: str) -> None:
    """Search numbers available to buy."""
    with _client(ctx, Account) as account:
        found = _run(lambda: account.numbers_search(country_code, pattern))
        click.echo(json.dumps(found, indent=2))


@numbers_group.command("buy")
@click.argument("country_code")
@click.argument("msisdn")
@click.pass_context
def numbers_buy(ctx: click.Context, country_code: str, msisdn: str) -> None:
    """Buy a number."""
    with _client(ctx, Account) as account:
        if not _run(lambda: account.numbers_buy(country_code, msisdn)):
            raise click.ClickException(f"Could not buy {msisdn}")
        click.echo(f"Bought: {msisdn}")


@numbers_group.command("cancel")
@click.argument("country_code")
@click.argument("msisdn")
@click.pass_context
def numbers_cancel(ctx: click.Context, country_code: str, msisdn: str) -> None:
    """Cancel a number."""
    with _client(ctx, Account) as account:
        if not _run(lambda: account.numbers_cancel(country_code, msisdn)):
            raise click.ClickException(f"Could not cancel {msisdn}")
        click.echo(f"Cancelled: {msisdn}")


@cli.command()
@click.argument("to")
@click.argument("sender")
@click.argument("text")
@click.option(
    "--type", "msg_type",
    type=click.Choice(["auto", "text", "unicode"]),
    default="auto",
    help="Message type; auto detects unicode from the text.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_context
def send(
    ctx: click.Context, to: str, sender: str, text: str, msg_type: str, as_json: bool,
) -> None:
    """Send a text message."""
    unicode = None if msg_type == "auto" else msg_type == "unicode"
    with _client(ctx, Message) as sms:
        result = _run(lambda: sms.send_text(to, sender, text, unicode=unicode))
    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(format_overview(result), nl=False)
