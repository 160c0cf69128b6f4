from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Barbearia"
    CURRENCY_SYMBOL: str = "R$"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Sample credentials, plaintext on purpose; not a security mechanism.
    CLIENT_SECRET: str = "123"
    STAFF_SECRET: str = "1234"

    PIX_PAYMENT_CODE: str = "00020126360014BR.GOV.BCB.PIX0114+5511999999999520400005303986"


settings = Settings()
