from pydantic import BaseModel, Field

class SitemapEntry(BaseModel):
    loc: str = Field(..., description="Absolute URL of the page.")
    lastmod: str = Field(..., description="ISO 8601 last-modified timestamp.")
