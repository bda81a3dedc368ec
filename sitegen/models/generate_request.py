from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from sitegen.models.build_mode import BuildMode
from sitegen.models.page import SiteConfig
from sitegen.models.translation import TranslationRecord


class GenerateRequest(BaseModel):
    config: SiteConfig
    records: List[TranslationRecord] = Field(
        description="Translation records for every namespace in every language.",
    )
    build_mode: BuildMode = BuildMode.PRODUCTION
    baseline: Optional[Dict[str, Any]] = Field(
        default=None,
        description=(
            "Baseline hosting document the generated rules are appended to. "
            "Required when the config enables hosting rule generation."
        ),
        examples=[{"hosting": {"public": "public", "redirects": [], "rewrites": []}}],
    )
