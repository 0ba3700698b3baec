"""Textual host for the editing engine."""

from .controller import TextualUIHooks, TextualVimAdapter, translate_key

__all__ = ["TextualUIHooks", "TextualVimAdapter", "translate_key"]
