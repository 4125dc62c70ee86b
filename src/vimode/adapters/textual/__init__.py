"""Textual host adapter and demo app."""

from .controller import NAMED_KEYS, TextualUIHooks, TextualVimAdapter, translate_key

__all__ = ["NAMED_KEYS", "TextualUIHooks", "TextualVimAdapter", "translate_key"]
