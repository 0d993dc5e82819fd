import codecs
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from vaultcodec.bootstrap.config.loader import get_configfile

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EncodingSettings(BaseModel):
    url_safe: Annotated[
        bool,
        Field(
            description=(
                "Base64 alphabet used when producing base64 text.\n"
                "True selects the URL-safe alphabet ('-' and '_') without padding,\n"
                "False the standard alphabet ('+' and '/') with '=' padding."
            ),
            default=True
        )
    ]

    text_encoding: Annotated[
        str,
        Field(
            description="Encoding used when decoding bytes into text.",
            default="utf-8"
        )
    ]

    @field_validator("text_encoding")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding '{v}'.")
        return v


class CodecConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VAULTCODEC_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    encoding: Annotated[
        EncodingSettings,
        Field(
            description="Defaults applied to byte/text conversions.",
            default_factory=EncodingSettings
        )
    ]

    output: Annotated[
        Literal["yaml", "json"],
        Field(
            description="Format used by vaultctl to render results.",
            default="yaml"
        )
    ]

    log_level: Annotated[
        LogLevel,
        Field(
            description=(
                "Logging verbosity.\n"
                "DEBUG    → registrations and conversions.\n"
                "WARNING  → validation failures only (default)."
            ),
            default="WARNING"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)

        configfile = get_configfile()
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)

        return sources
