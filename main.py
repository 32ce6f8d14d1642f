#!/usr/bin/env python3
import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
import logging

from caesar_toolkit.crypto.classical import caesar_cipher
from caesar_toolkit.crypto.cracker import Attack, CrackConfig, format_report, rank_candidates, run
from caesar_toolkit.crypto.reference import ReferenceDataError
from caesar_toolkit.utils.textio import read_input, write_output

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
PREVIEW_LENGTH = 40

def print_banner():
    banner = """
    ╔═══════════════════════════════════════╗
    ║            Caesar Toolkit             ║
    ║    ASCII Caesar Cipher and Cracker    ║
    ╚═══════════════════════════════════════╝
    """
    err_console.print(Panel(banner, style="bold blue"))

def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(message)s',
        handlers=[RichHandler(console=err_console, show_path=False)]
    )

@click.group(context_settings={'auto_envvar_prefix': 'CAESAR_TOOLKIT'})
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Logging verbosity')
def cli(log_level):
    """Caesar Toolkit - ASCII Caesar cipher and key cracker"""
    configure_logging(log_level.upper())
    if err_console.is_terminal:
        print_banner()

@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('key', type=int)
@click.option('-i', '--input', 'input_file', type=click.Path(dir_okay=False),
              help='Input plaintext/ciphertext file (default: stdin)')
@click.option('-o', '--output', 'output_file', type=click.Path(dir_okay=False),
              help='Output plaintext/ciphertext file (default: stdout)')
def cipher(key, input_file, output_file):
    """Encrypt or decrypt ASCII text with shift KEY (negate KEY to decrypt)"""
    try:
        text = read_input(input_file)
        write_output(output_file, caesar_cipher(text, key))
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(str(e))

@cli.command()
@click.option('-i', '--ciphertext-file', type=click.Path(dir_okay=False),
              help='File containing ciphertext (default: stdin)')
@click.option('-a', '--attack', type=click.Choice([a.value for a in Attack]),
              default=Attack.DICTIONARY.value, show_default=True, help='Attack type')
@click.option('-d', '--dictionary', 'dictionary_file', type=click.Path(dir_okay=False),
              help='Newline separated word list for the dictionary attack')
@click.option('-t', '--top', type=click.IntRange(min=0), default=0,
              help='Also list the N best scoring candidate keys')
def crack(ciphertext_file, attack, dictionary_file, top):
    """Find the key most likely to decrypt a Caesar ciphertext"""
    config = CrackConfig(
        ciphertext_file=ciphertext_file,
        attack=Attack(attack),
        dictionary_file=dictionary_file,
        top=top,
    )
    try:
        result = run(config)
    except (OSError, UnicodeDecodeError, ReferenceDataError) as e:
        raise click.ClickException(str(e))

    console.print(format_report(result), highlight=False, markup=False)

    if config.top:
        print_candidates(result, config.top)

def print_candidates(result, limit):
    """Show the ranked candidate keys with a preview of each decryption"""
    score_header = 'Words' if result.attack is Attack.DICTIONARY else 'Distance'
    table = Table(title=f"Top {limit} candidate keys ({result.attack.value} attack)")
    table.add_column('Key', justify='right')
    table.add_column(score_header, justify='right')
    table.add_column('Preview')

    for shift, score in rank_candidates(result, limit):
        score_text = str(score) if isinstance(score, int) else f"{score:.6f}"
        preview = caesar_cipher(result.ciphertext[:PREVIEW_LENGTH], shift)
        table.add_row(str(shift), score_text, Text(repr(preview)))

    console.print(table)

if __name__ == '__main__':
    cli()
