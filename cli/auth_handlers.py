"""Command handlers for the CLI

Each handler returns the process exit code.
"""

import logging

from rich.console import Console

from api.response import ResponseEnvelope
from endpoints import HelloWorld
from oauth import Authenticator
from .status_display import show_token_status

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_TRANSPORT_ERROR = 3


def _report_failure(result: ResponseEnvelope, console: Console) -> int:
    console.print(f"[red][ERROR][/red] HTTP {result.status_code}: {result.error_message or 'request failed'}")
    if result.error_code:
        console.print(f"[dim]Error code: {result.error_code}[/dim]")
    return EXIT_API_ERROR


def handle_url(auth: Authenticator, console: Console, scope: str, redirect_uri: str,
               state: str = None, open_browser: bool = False) -> int:
    """Print the authorisation URL and optionally open it"""
    url = auth.authorisation_url(scope, redirect_uri, state=state)

    console.print("\n[bold]Authorise this application by visiting:[/bold]")
    console.print(str(url), soft_wrap=True)

    if open_browser:
        if auth.auth_builder.open_in_browser(url):
            console.print("[green][OK][/green] Browser opened successfully")
        else:
            console.print("[yellow]Could not open browser automatically[/yellow]")

    return EXIT_OK


def handle_exchange(auth: Authenticator, console: Console, code: str, redirect_uri: str) -> int:
    """Exchange an authorisation code and show the resulting tokens"""
    console.print("Exchanging authorisation code for tokens...")
    result = auth.get_access_token(code.strip(), redirect_uri)

    if not result.is_success:
        return _report_failure(result, console)
    if not auth.has_access_token():
        console.print("[red][ERROR][/red] Response did not contain a usable token")
        return EXIT_API_ERROR

    console.print("[green][OK][/green] Authentication successful!")
    show_token_status(auth, console)
    return EXIT_OK


def handle_refresh(auth: Authenticator, console: Console) -> int:
    """Refresh the tokens and show the result"""
    console.print("Refreshing access token...")
    result = auth.refresh_tokens()

    if not result.is_success:
        console.print("You may need to authorise the application again")
        return _report_failure(result, console)
    if not auth.has_access_token():
        console.print("[red][ERROR][/red] Response did not contain a usable token")
        return EXIT_API_ERROR

    console.print("[green][OK][/green] Token refreshed successfully")
    show_token_status(auth, console)
    return EXIT_OK


def handle_hello(auth: Authenticator, console: Console, endpoint: str) -> int:
    """Call one of the HelloWorld endpoints"""
    hello = HelloWorld(auth)
    calls = {
        "world": hello.hello_world,
        "application": hello.hello_application,
        "user": hello.hello_user,
    }
    result = calls[endpoint]()

    if not result.is_success:
        return _report_failure(result, console)

    console.print(f"[green][OK][/green] {result.data.get('message', result.http.text)}")
    return EXIT_OK
