from pydantic import BaseModel, ConfigDict

PERMANENT_REDIRECT = 301


class RedirectRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    destination: str
    type: int = PERMANENT_REDIRECT


class RewriteRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    destination: str
