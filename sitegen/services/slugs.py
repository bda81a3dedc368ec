"""Slug table construction and the translation availability gate."""

import logging
from typing import Dict, Iterable, List, Optional

from sitegen.models.translation import SlugTable, TranslationRecord
from sitegen.services.errors import MissingSlugError

logger = logging.getLogger(__name__)


def build_slug_table(languages: List[str], records: Iterable[TranslationRecord]) -> SlugTable:
    """Group *records* into ``{language: {namespace: slug}}``.

    Every configured language gets an entry, even when no record matches it.
    Records whose slug is absent are kept with a ``None`` value so that
    "namespace present without slug" stays distinguishable from "namespace
    absent".  Records for languages that are not configured are ignored.
    """
    records = list(records)
    table: SlugTable = {}
    for lang in languages:
        namespaces: Dict[str, Optional[str]] = {}
        for record in records:
            if record.lang == lang:
                namespaces[record.namespace] = record.slug
        table[lang] = namespaces
    return table


def translations_ready(table: SlugTable) -> bool:
    """Return *False* when any language resolved zero namespaces.

    The content store can answer with an empty set while translations are
    being rebuilt; in that state nothing should be generated at all.
    """
    for lang, namespaces in table.items():
        if not namespaces:
            logger.warning("Translations for language '%s' are missing", lang)
            return False
    return True


def lookup_slug(table: SlugTable, lang: str, page_name: str) -> str:
    """Return the slug of *page_name* in *lang*.

    Raises:
        MissingSlugError: if the namespace or its slug is absent.
    """
    slug = table.get(lang, {}).get(page_name)
    if not slug:
        raise MissingSlugError(lang, page_name)
    return slug
