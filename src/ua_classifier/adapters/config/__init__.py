"""Configuration adapters."""

from ua_classifier.adapters.config.app_config import AppConfig, normalize_log_level

__all__ = ["AppConfig", "normalize_log_level"]
