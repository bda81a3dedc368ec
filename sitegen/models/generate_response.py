from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from sitegen.models.hosting import RedirectRule, RewriteRule


class GenerateResponse(BaseModel):
    ready: bool
    """*False* when some language had no translations; everything else is empty."""
    pages_generated: int
    routes: List[Dict[str, Any]] = Field(
        description="Routes as handed to the rendering framework, unset properties omitted.",
    )
    redirects: List[RedirectRule]
    rewrites: List[RewriteRule]
    hosting: Optional[Dict[str, Any]] = None
