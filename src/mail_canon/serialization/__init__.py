"""Concrete text grammars for value trees."""

from .astn_grammar import AstnGrammar, serialize_astn
from .json_grammar import JsonGrammar, serialize

__all__ = ["AstnGrammar", "JsonGrammar", "serialize", "serialize_astn"]
