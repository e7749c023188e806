"""
Per-invocation state shared by the depgrammar commands.

The ``cli`` group builds one :class:`DepGrammarContext` from its global
options and the loaded configuration; commands receive it through
:data:`pass_context`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import click

from depgrammar.config import DepGrammarConfig


@dataclass
class DepGrammarContext:
    """Global options and configuration for one CLI run.

    Attributes:
        config: Loaded configuration; defaults when no file was found.
        config_path: File the configuration came from, if any.
        verbosity: Number of ``-v`` flags given.
        color: ``--color``/``--no-color`` choice; ``None`` detects per stream.
    """

    config: DepGrammarConfig = field(default_factory=DepGrammarConfig)
    config_path: Optional[Path] = None
    verbosity: int = 0
    color: Optional[bool] = None

    def resolve_format(self, requested: Optional[str] = None) -> str:
        """Return the command's ``--format``, or the configured default."""
        return (requested or self.config.output_format).lower()


#: Click decorator for injecting :class:`DepGrammarContext` into commands.
pass_context = click.make_pass_decorator(DepGrammarContext, ensure=True)
