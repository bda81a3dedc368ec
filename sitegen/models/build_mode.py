from enum import Enum
from typing import Optional


class BuildMode(str, Enum):
    """How the generated routes will be served.

    ``LOCAL_PREVIEW`` adds wildcard match paths to the 404 pages because the
    preview server has no hosting rewrites; ``PRODUCTION`` leaves the
    wildcard handling to the hosting rules.
    """

    LOCAL_PREVIEW = "local_preview"
    PRODUCTION = "production"

    @classmethod
    def from_environment(cls, env: Optional[str]) -> "BuildMode":
        return cls.LOCAL_PREVIEW if env == "development" else cls.PRODUCTION
