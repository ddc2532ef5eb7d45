"""
Command-line interface for LingoChain.

Provides commands for:
- Translating text through the provider fallback chain
- Romanizing Telugu / Hindi / Japanese text offline
- Inspecting the provider chain and supported scripts
- Managing the optional LibreTranslate API key

Usage:
    lingochain translate "Hello" --target te
    lingochain translate "Hello" -l ja --json
    lingochain romanize "హలో" --lang te
    lingochain providers
    lingochain keys set libretranslate
"""

from __future__ import annotations

import json
import logging
from getpass import getpass
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from lingochain import __version__
from lingochain.config import ChainConfig
from lingochain.errors import LingoChainError
from lingochain.keys import KeyManager
from lingochain.pipeline import TranslationService
from lingochain.romanize import romanize as romanize_text
from lingochain.romanize import script_for, supported_languages
from lingochain.translate.providers import default_providers

app = typer.Typer(
    name="lingochain",
    help="LingoChain: multi-provider translation with phonetic romanization",
    add_completion=False,
)
keys_app = typer.Typer(help="Manage provider API keys")
app.add_typer(keys_app, name="keys")
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"LingoChain v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log each provider attempt",
    ),
):
    """LingoChain: translate text through a chain of free providers."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


@app.command()
def translate(
    text: str = typer.Argument(..., help="Text to translate"),
    target_lang: str = typer.Option(
        ..., "--target", "-l",
        help="Target language code (e.g. te, hi-IN, ja)",
    ),
    clean: bool = typer.Option(
        False, "--clean",
        help="Normalize whitespace, quotes and repeated punctuation first",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the result as JSON",
    ),
):
    """Translate text, with a pronunciation for non-Latin scripts."""
    try:
        with TranslationService(config=ChainConfig.from_env(), clean_input=clean) as service:
            result = service.translate(text, target_lang)
    except LingoChainError as e:
        console.print(f"[red]Error:[/] {e}", style="bold")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
        return

    console.print(result.text, markup=False)
    if result.pronunciation:
        console.print(f"[cyan]Pronunciation:[/] {result.pronunciation}")
    source = result.source_lang or "auto"
    console.print(f"[dim]{source} → {target_lang.strip()} via {result.provider}[/]")


@app.command()
def romanize(
    text: str = typer.Argument(..., help="Text in Telugu, Devanagari or kana"),
    lang: str = typer.Option(..., "--lang", "-l", help="Language code of the text"),
):
    """Romanize native-script text without any network call."""
    if script_for(lang) is None:
        console.print(
            f"[red]Error:[/] no romanization table for '{lang}' "
            f"(supported: {', '.join(supported_languages())})",
            style="bold",
        )
        raise typer.Exit(1)

    result = romanize_text(text, lang)
    if result is None:
        console.print("[yellow]Nothing to romanize[/]")
        raise typer.Exit(1)
    console.print(result, markup=False)


@app.command()
def providers():
    """Show the provider chain in fallback order."""
    config = ChainConfig.from_env()

    table = Table(title="Provider Chain")
    table.add_column("#", style="dim")
    table.add_column("Provider", style="cyan")
    table.add_column("Tier", style="green")
    for i, provider in enumerate(default_providers(config), 1):
        table.add_row(str(i), provider.name, provider.tier.value)
    console.print(table)

    console.print(
        f"[dim]Timeouts: connect {config.connect_timeout}s, read {config.read_timeout}s; "
        f"MyMemory source language: {config.source_lang}[/]"
    )


@app.command()
def languages():
    """List target languages that get a pronunciation."""
    table = Table(title="Romanized Scripts")
    table.add_column("Code", style="cyan")
    table.add_column("Script", style="green")
    for code in supported_languages():
        table.add_row(f"{code} ({code}-*)", script_for(code).script)
    console.print(table)


@keys_app.command("set")
def keys_set(
    service: str = typer.Argument(..., help="Service name (e.g. libretranslate)"),
):
    """Store an API key in the OS keychain (or ~/.lingochain/keys.json)."""
    key = getpass(f"Enter API key for {service}: ").strip()
    if not key:
        console.print("[red]Error:[/] Key cannot be empty")
        raise typer.Exit(1)

    km = KeyManager()
    storage = km.set_key(service, key)
    console.print(f"[green]✓[/] API key for {service} saved to {storage}")
    if storage == "config":
        console.print(f"[yellow]Note:[/] Key stored in local file ({km.config_file})")
        console.print("       For better security, use environment variables")


@keys_app.command("delete")
def keys_delete(
    service: str = typer.Argument(..., help="Service name (e.g. libretranslate)"),
):
    """Remove a stored API key (environment variables are untouched)."""
    if KeyManager().delete_key(service):
        console.print(f"[green]✓[/] Deleted key for {service}")
    else:
        console.print(f"[yellow]No stored key for {service}[/]")


@keys_app.command("show")
def keys_show(
    service: Optional[str] = typer.Argument(None, help="Only show this service"),
):
    """Show which API keys are configured (masked)."""
    km = KeyManager()
    infos = [km.get_key_info(service)] if service else km.list_keys()

    table = Table(title="API Keys")
    table.add_column("Service", style="cyan")
    table.add_column("Source", style="green")
    table.add_column("Key")
    for info in infos:
        table.add_row(info.service, info.source, info.masked_value or "-")
    console.print(table)
    console.print("[dim]Priority: env > keychain > config file[/]")


if __name__ == "__main__":
    app()
