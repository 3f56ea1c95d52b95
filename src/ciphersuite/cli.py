from __future__ import annotations

import logging
from typing import Optional

import typer

from ciphersuite import __version__
from ciphersuite.classical import register_all
from ciphersuite.classical.dispatch import run
from ciphersuite.core.config import load_settings
from ciphersuite.core.errors import CipherError
from ciphersuite.core.logging_setup import configure_logging
from ciphersuite.core.registry import get_plugin, list_plugins, parse_int_key
from ciphersuite.core.results import Direction

log = logging.getLogger(__name__)

app = typer.Typer(help="CipherSuite CLI: Caesar, Vigenere, A1Z26 and Atbash text ciphers.")

# Menu order of the interactive prompt
MENU = ("caesar", "vigenere", "a1z26", "atbash")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ciphersuite {__version__}")
        raise typer.Exit()


@app.callback()
def _init(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override CIPHERSUITE_LOG_LEVEL (DEBUG, INFO, WARNING, ...)."
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
):
    try:
        settings = load_settings().with_overrides(log_level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    configure_logging(settings)
    # Register plugins exactly once per CLI run
    register_all()


@app.command()
def plugins():
    """List all registered ciphers with their menu number and key type."""
    for name in list_plugins():
        entry = get_plugin(name)
        number = MENU.index(name) + 1 if name in MENU else "-"
        aliases = f" (aliases: {', '.join(entry.aliases)})" if entry.aliases else ""
        typer.echo(f"{number}  {name:<9} key={entry.key_kind}{aliases}")


def _run_or_fail(cipher: str, text: str, key: Optional[str], direction: Direction) -> str:
    try:
        return run(cipher, text, key, direction).text
    except ValueError as e:
        # CipherError is a ValueError; so is an unknown cipher name
        raise typer.BadParameter(str(e))


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (caesar, vigenere, a1z26, atbash)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift number or keyword, if the cipher needs one."),
    text: str = typer.Argument(..., help="Message to encrypt."),
):
    """Encrypt (or encode) a message."""
    typer.echo(_run_or_fail(cipher, text, key, Direction.ENCRYPT))


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (caesar, vigenere, a1z26, atbash)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift number or keyword, if the cipher needs one."),
    text: str = typer.Argument(..., help="Message to decrypt."),
):
    """Decrypt (or decode) a message."""
    typer.echo(_run_or_fail(cipher, text, key, Direction.DECRYPT))


def _print_menu() -> None:
    typer.echo("Choose a cipher")
    typer.echo("-----------")
    for i, name in enumerate(MENU, start=1):
        typer.echo(f"{i} - {get_plugin(name).menu_label}")


def _read_choice() -> str:
    while True:
        raw = typer.prompt("Enter a number").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(MENU):
            return MENU[int(raw) - 1]
        typer.echo(f"Invalid choice pick a number 1-{len(MENU)}.")


def _read_direction() -> Direction:
    while True:
        raw = typer.prompt("Press 'E' for encrypt or 'D' for decrypt.", prompt_suffix="\n").strip()
        if raw in ("E", "D"):
            return Direction.parse(raw)


def _read_int_key() -> str:
    while True:
        raw = typer.prompt("Choose a key number.", prompt_suffix="\n")
        try:
            parse_int_key(raw)
        except CipherError:
            continue
        return raw


@app.command()
def interactive():
    """Menu-driven prompt: pick a cipher, a direction, a message and a key."""
    _print_menu()
    name = _read_choice()
    direction = _read_direction()
    message = typer.prompt(
        f"Enter the message you want to {direction.value}.",
        prompt_suffix="\n",
        default="",
        show_default=False,
    )

    key: Optional[str] = None
    kind = get_plugin(name).key_kind
    if kind == "int":
        key = _read_int_key()
    elif kind == "text":
        key = typer.prompt("Enter the key message.", prompt_suffix="\n")

    log.info("interactive: %s %s", name, direction.value)
    typer.echo(_run_or_fail(name, message, key, direction))


def main():
    app()


if __name__ == "__main__":
    main()
