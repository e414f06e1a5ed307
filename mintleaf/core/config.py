from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "MintLeaf"
    BUSINESS_TIMEZONE: str = "Europe/Budapest"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = ""  # "memory", "json", "firestore"; empty picks by ENV
    DATA_DIR: str = "./data/units"

    FIRESTORE_PROJECT_ID: str | None = None
    FIRESTORE_DATABASE: str = "(default)"
    FIRESTORE_CREDENTIALS_FILE: str | None = None  # service account JSON; unset uses ADC

    PHONE_COUNTRY_CODE: str = "+36"
    PHONE_TRUNK_PREFIX: str = "06"

    DEFAULT_BOOKING_DURATION_MINUTES: int = 120
    WIZARD_SESSION_TTL_MINUTES: int = 30
    CONTRAST_WARNING_THRESHOLD: float = 4.5
    CALENDAR_FILL_ADJACENT_DAYS: bool = False


settings = Settings()
