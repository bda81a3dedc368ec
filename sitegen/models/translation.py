from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

# {language: {namespace: slug}}; a namespace may be present with no slug
SlugTable = Dict[str, Dict[str, Optional[str]]]


class TranslationRecord(BaseModel):
    """One translated namespace for one language, as served by the content store.

    Accepts the flat ``{lang, namespace, slug}`` shape as well as the
    content-store node shape ``{lang, namespace, singleTranslations: {slug}}``.
    """

    model_config = ConfigDict(frozen=True)

    lang: str
    namespace: str
    slug: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_single_translations(cls, data: Any) -> Any:
        if isinstance(data, dict) and "singleTranslations" in data:
            data = dict(data)
            single = data.pop("singleTranslations") or {}
            if not isinstance(single, dict):
                raise ValueError("singleTranslations must be an object")
            data.setdefault("slug", single.get("slug"))
        return data
