"""End-to-end rendering of a parsed mail record."""

from __future__ import annotations

import logging

from .conversion import convert, to_astn
from .core.config import OutputSettings
from .ingestion.records import ParsedMail
from .normalization import assemble
from .serialization import AstnGrammar, JsonGrammar

LOGGER = logging.getLogger(__name__)


def render_mail(parsed: ParsedMail, settings: OutputSettings | None = None) -> str:
    """Normalize, convert and serialize ``parsed`` in the configured grammar.

    The whole value tree is built before any text is produced; errors raised
    by normalization or conversion propagate unchanged.
    """
    settings = settings or OutputSettings()
    mail = assemble(parsed)
    LOGGER.debug("Rendering mail as %s", settings.format)
    if settings.format == "astn":
        grammar = AstnGrammar(settings.indentation, settings.newline)
        return grammar.serialize(to_astn(mail))
    return JsonGrammar(settings.indentation, settings.newline).serialize(convert(mail))


__all__ = ["render_mail"]
