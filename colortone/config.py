from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict

from colortone.domain.enums import MergeStrategy

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    target_width: int = Field(50, ge=1, validation_alias=AliasChoices("COLORTONE_TARGET_WIDTH", "target_width"))
    target_height: int = Field(50, ge=1, validation_alias=AliasChoices("COLORTONE_TARGET_HEIGHT", "target_height"))
    max_colors: int = Field(5, ge=0, validation_alias=AliasChoices("COLORTONE_MAX_COLORS", "max_colors"))
    merge_strategy: MergeStrategy = Field(MergeStrategy.midpoint, validation_alias=AliasChoices("COLORTONE_MERGE_STRATEGY", "merge_strategy"))  # midpoint|running_mean
    assets_dir: str = Field("assets", validation_alias=AliasChoices("COLORTONE_ASSETS_DIR", "assets_dir"))
    max_workers: int = Field(2, ge=1, validation_alias=AliasChoices("COLORTONE_MAX_WORKERS", "max_workers"))
