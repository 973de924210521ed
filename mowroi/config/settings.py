from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    lead_from: str = "ROI Calculator <calculator@autonomousmowingsolutions.com>"
    lead_recipients: list[str] = ["nowicki@autonomousmowingsolutions.com"]
    equipment_catalog_path: Optional[str] = None
    equipment_catalog_url: Optional[str] = None
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MOWROI_")
