from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_TAGS: tuple[str, ...] = (
    "a", "img", "figure", "picture", "source",
    "table", "tr", "td", "th", "thead", "tbody", "col", "colgroup",
    "h1", "h2", "h3", "h4", "h5", "h6", "blockquote",
    "ul", "ol", "li",
)


class ReplacementSetting(BaseModel):
    """One post-processing search/replace pair as written in configuration."""

    search: str | None = None
    replace: str | None = None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_file: str | None = None

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "content"
    db_username: str = "content"
    db_password: str = "secret"

    storage_root: str = "storage"
    output_template: str = "output/%schema%.%table%.%field%;normalised.json"
    report_template: str = "output/%schema%.%table%.%field%;report.csv"
    batch_file: str = "data/fields_to_batch_normalise.json"
    default_primary_key: str = "id"

    allowed_tags: list[str] = []
    post_processing_replacements: list[ReplacementSetting] = []
