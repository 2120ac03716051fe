"""Configuration management for the storefront suite."""

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at import time
load_dotenv()

DEFAULT_BASE_URL = "https://demowebshop.tricentis.com"
CONFIG_FILE_NAMES = ["storefront_e2e.yaml", "storefront_e2e.yml", ".storefront_e2e.yaml"]


class BrowserConfig(BaseModel):
    """Browser context and timeout settings (milliseconds)."""

    viewport_width: int = 1280
    viewport_height: int = 720
    action_timeout_ms: int = 15000
    navigation_timeout_ms: int = 30000
    expect_timeout_ms: int = 10000


class VerificationConfig(BaseModel):
    """Price verification settings."""

    tolerance: float = 0.01


class ArtifactsConfig(BaseModel):
    """Where test artifacts are written."""

    screenshot_dir: Path = Path("playwright-report/screenshots")
    failure_dir_name: str = "failures"
    capture_screenshots: bool = True


class Config(BaseSettings):
    """Main configuration for the storefront suite."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_E2E_",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    base_url: str = DEFAULT_BASE_URL
    test_data: Path | None = None

    # Credentials of a pre-registered account, shared with the fixture file
    test_user_email: str | None = Field(
        default=None,
        validation_alias=AliasChoices("test_user_email", "TEST_USER_EMAIL"),
    )
    test_user_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("test_user_password", "TEST_USER_PASSWORD"),
    )

    # Sub-configurations
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    verification: VerificationConfig = Field(default_factory=VerificationConfig)
    artifacts: ArtifactsConfig = Field(default_factory=ArtifactsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values passed in from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def has_test_user(self) -> bool:
        """True when both credentials are set and non-blank."""
        return bool(
            self.test_user_email and self.test_user_email.strip()
            and self.test_user_password and self.test_user_password.strip()
        )


def find_config_file(directory: Path | None = None) -> Path | None:
    """Return the first known config file in ``directory`` (default: cwd)."""
    base = directory or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    config_data: dict = {}

    if config_path is None:
        config_path = find_config_file()

    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "storefront_e2e" in raw:
                config_data = raw["storefront_e2e"]
            elif raw:
                config_data = raw

    # Environment variables override YAML
    return Config(**config_data)
