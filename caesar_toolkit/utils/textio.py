from typing import Optional
import click

STREAM = '-'

def read_input(source: Optional[str] = None) -> str:
    """
    Read the whole of a file, or stdin when no source is given.

    Content is read as bytes and decoded afterwards so carriage returns
    produced by the cipher are not turned into newlines.
    """
    with click.open_file(source or STREAM, 'rb') as f:
        return f.read().decode('utf-8')

def write_output(destination: Optional[str], text: str) -> None:
    """Write text to a file (created or truncated) or to stdout"""
    with click.open_file(destination or STREAM, 'wb') as f:
        f.write(text.encode('utf-8'))
        f.flush()
