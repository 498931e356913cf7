from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración del cliente Saferpay utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # Saferpay JSON API credentials
    SAFERPAY_CUSTOMER_ID: str = Field("", description="Customer ID sent in every RequestHeader")
    SAFERPAY_TERMINAL_ID: str = Field("", description="Terminal ID for payment page initialization")
    SAFERPAY_API_USERNAME: str = Field("", description="JSON API basic auth username")
    SAFERPAY_API_PASSWORD: str = Field("", description="JSON API basic auth password")
    SAFERPAY_SPEC_VERSION: str = Field("1.7", description="Saferpay JSON API specification version")

    # Transport
    SAFERPAY_TIMEOUT: float = Field(30.0, gt=0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_api_credentials(self) -> bool:
        return bool(self.SAFERPAY_API_USERNAME and self.SAFERPAY_API_PASSWORD)


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
