"""
Configuration Management System for DemoAI

This module provides a centralized configuration system that supports a 3-tier
precedence hierarchy: environment → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class AuthConfig(BaseModel):
    """Simulated authentication settings"""
    model_config = ConfigDict(extra='forbid')

    latency_seconds: float = Field(default=1.5, ge=0.0, le=30.0, description="Simulated sign-in round trip")
    min_password_length: int = Field(default=8, ge=1, le=128, description="Minimum password length")


class SessionsConfig(BaseModel):
    """Demo session settings"""
    model_config = ConfigDict(extra='forbid')

    demo_fixtures_enabled: bool = Field(default=True, description="Seed sample sessions in demo mode")


class SettingsStorageConfig(BaseModel):
    """User settings persistence"""
    model_config = ConfigDict(extra='forbid')

    storage_path: str = Field(default="data/settings/user_settings.yaml", description="Settings file path")
    autoload: bool = Field(default=True, description="Load saved settings at startup")


class SpeechConfig(BaseModel):
    """Speech capability settings"""
    model_config = ConfigDict(extra='forbid')

    voice_input_available: Optional[bool] = Field(
        default=None, description="Force the voice-input probe result (None = detect)"
    )


class LoggingConfig(BaseModel):
    """Logging configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="DEBUG", description="File log level")
    console_level: str = Field(default="WARNING", description="Console log level")
    log_dir: str = Field(default="data/logs", description="Directory for rotating log files")
    file_logging: bool = Field(default=True, description="Write logs to a rotating file")


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    notification_buffer_size: int = Field(default=50, ge=1, le=1000, description="Notifications kept in memory")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    auth: AuthConfig = Field(default_factory=AuthConfig)
    sessions: SessionsConfig = Field(default_factory=SessionsConfig)
    settings: SettingsStorageConfig = Field(default_factory=SettingsStorageConfig)
    speech: SpeechConfig = Field(default_factory=SpeechConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# env var -> (section, key, converter)
_ENV_MAP = {
    'DEMOAI_AUTH_LATENCY': ('auth', 'latency_seconds', float),
    'DEMOAI_MIN_PASSWORD_LENGTH': ('auth', 'min_password_length', int),
    'DEMOAI_DEMO_FIXTURES': ('sessions', 'demo_fixtures_enabled', 'bool'),
    'DEMOAI_SETTINGS_PATH': ('settings', 'storage_path', str),
    'DEMOAI_VOICE_INPUT': ('speech', 'voice_input_available', 'bool'),
    'LOG_LEVEL': ('logging', 'level', str),
    'DEMOAI_LOG_DIR': ('logging', 'log_dir', str),
}


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'on')


class ConfigManager:
    """Centralized configuration manager with 3-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "config"
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        """Save configuration to YAML file"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")
            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Dict[str, Any]] = {}
        for env_key, (section, config_key, convert) in _ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = _to_bool(value) if convert == 'bool' else convert(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: not a valid {config_key}")
                continue
            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def save_user_config(self, config_updates: Dict[str, Any]) -> bool:
        """Save user-level configuration updates"""
        user_path = self.config_dir / "user.yaml"
        existing_config = self._load_yaml_file(user_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(user_path, existing_config)
        if success:
            self._user_config = None
        return success

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._system_config = None
        self._user_config = None
