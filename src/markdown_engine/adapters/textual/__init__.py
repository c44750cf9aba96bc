"""Textual host adapter; the demo app lives in :mod:`.app`."""

from .controller import TextualMarkdownAdapter, TextualUIHooks, parse_textual_key

__all__ = ["TextualMarkdownAdapter", "TextualUIHooks", "parse_textual_key"]
