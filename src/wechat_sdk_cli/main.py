"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TypeVar

import httpx
import structlog
import typer
from rich.console import Console

from wechat_sdk import __version__
from wechat_sdk.client import WechatSdk
from wechat_sdk.observability import configure_logging
from wechat_sdk_core.config.settings import WechatSettings
from wechat_sdk_core.exceptions import WechatSdkError

app = typer.Typer(
    name="wechat-sdk",
    help="Fetch cached WeChat credentials and call WeChat APIs",
)
console = Console()
logger = structlog.get_logger()

T = TypeVar("T")


def _settings(app_id: str | None, app_secret: str | None, verbose: bool) -> WechatSettings:
    """Load settings from the environment with command-line overrides."""
    settings = WechatSettings().merged(
        app_id=app_id,
        app_secret=app_secret,
        log_level="DEBUG" if verbose else None,
    )
    configure_logging(settings)
    return settings


def _error_message(exc: Exception) -> str:
    """Describe a failure without echoing query strings, which can hold the app secret."""
    if isinstance(exc, httpx.HTTPStatusError):
        url = exc.request.url.copy_with(query=None)
        return f"HTTP {exc.response.status_code} from {url}"
    return str(exc)


def _run(settings: WechatSettings, action: Callable[[WechatSdk], Awaitable[T]]) -> T:
    """Run ``action`` against a fresh SDK, turning SDK and HTTP errors into exit code 1."""

    async def _main() -> T:
        async with WechatSdk(settings) as wechat:
            return await action(wechat)

    try:
        return asyncio.run(_main())
    except (WechatSdkError, httpx.HTTPError) as exc:
        console.print(f"[red]Error:[/red] {_error_message(exc)}")
        raise typer.Exit(code=1) from exc


def _parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` pairs into a dict."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {pair!r}")
        params[key] = value
    return params


AppIdOption = typer.Option(None, "--app-id", help="App id (default: WECHAT_APP_ID)")
AppSecretOption = typer.Option(None, "--app-secret", help="App secret (default: WECHAT_APP_SECRET)")
VerboseOption = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


@app.command()
def token(
    app_id: str | None = AppIdOption,
    app_secret: str | None = AppSecretOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the current access token."""
    settings = _settings(app_id, app_secret, verbose)
    console.print(_run(settings, lambda wechat: wechat.get_token()))


@app.command()
def ticket(
    app_id: str | None = AppIdOption,
    app_secret: str | None = AppSecretOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the current JS-API ticket."""
    settings = _settings(app_id, app_secret, verbose)
    console.print(_run(settings, lambda wechat: wechat.get_jsapi_ticket()))


@app.command()
def code2session(
    js_code: str = typer.Argument(..., help="Login code from wx.login()"),
    app_id: str | None = AppIdOption,
    app_secret: str | None = AppSecretOption,
    verbose: bool = VerboseOption,
) -> None:
    """Exchange a mini program login code for a session."""
    settings = _settings(app_id, app_secret, verbose)
    session = _run(settings, lambda wechat: wechat.code2session(js_code))
    console.print_json(session.model_dump_json(exclude_none=True))


@app.command()
def code2token(
    code: str = typer.Argument(..., help="OAuth code from the authorize redirect"),
    app_id: str | None = AppIdOption,
    app_secret: str | None = AppSecretOption,
    verbose: bool = VerboseOption,
) -> None:
    """Exchange a web OAuth code for a user access token."""
    settings = _settings(app_id, app_secret, verbose)
    result = _run(settings, lambda wechat: wechat.code2token(code))
    console.print_json(result.model_dump_json(exclude_none=True))


@app.command()
def execute(
    api: str = typer.Argument(..., help="API path, e.g. /user/get"),
    param: list[str] = typer.Option([], "--param", "-p", help="Query parameter key=value"),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method"),
    body: Path | None = typer.Option(None, "--body", help="JSON file sent as request body"),
    app_id: str | None = AppIdOption,
    app_secret: str | None = AppSecretOption,
    verbose: bool = VerboseOption,
) -> None:
    """Call a WeChat API with the current access token."""
    settings = _settings(app_id, app_secret, verbose)
    request: dict[str, Any] = {"method": method.upper(), "params": _parse_params(param)}
    if body is not None:
        request["json"] = json.loads(body.read_text())
    result = _run(settings, lambda wechat: wechat.execute(api, request))
    console.print_json(data=result)


@app.command()
def callback(
    event_file: Path = typer.Argument(
        ..., help="JSON file holding the callback payload", exists=True
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Run a callback payload through the event codec and print the result."""
    settings = _settings(None, None, verbose)
    event = json.loads(event_file.read_text())
    result = _run(settings, lambda wechat: wechat.callback(event))
    console.print_json(data=result)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"wechat-sdk v{__version__}")


if __name__ == "__main__":
    app()
