from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDSHELF_")

    # Bundled snapshot location
    data_dir: Path = PACKAGE_DATA_DIR
    catalog_resource: str = "WOT-Scryfall"

    # Overrides the packaged symbol -> glyph table when set
    symbol_table_path: Path | None = None

    # Detail screen feature flags
    swipe_enabled: bool = True
    swipe_threshold: float = 100.0
    mana_glyphs_enabled: bool = True
    legality_columns: int = 2
    include_reminder_parens: bool = True


settings = Settings()
