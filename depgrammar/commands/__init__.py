"""Inspection subcommands of the depgrammar CLI."""
