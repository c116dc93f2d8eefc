# soroka_food/models/settings.py
from typing import Optional

from sqlmodel import SQLModel, Field

SETTINGS_ID = 1  # singleton row
DEFAULT_SITE_NAME = "Soroka Food"


class SiteSettings(SQLModel, table=True):
    __tablename__ = "site_settings"

    id: int = Field(default=SETTINGS_ID, primary_key=True)
    site_name: Optional[str] = None
    site_description: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    logo: Optional[str] = None
    youtube: Optional[str] = None
    instagram: Optional[str] = None
    telegram: Optional[str] = None
    tiktok: Optional[str] = None

    def public_view(self):
        """Public-facing subset, blanks filled with defaults."""
        return {
            "site_name": self.site_name or DEFAULT_SITE_NAME,
            "site_description": self.site_description or "",
            "logo": self.logo or "",
            "social_links": {
                "youtube": self.youtube or "",
                "instagram": self.instagram or "",
                "telegram": self.telegram or "",
                "tiktok": self.tiktok or "",
            },
        }
