"""
Configuration module for the Instatus provider.

Provides environment-backed provider settings and Pulumi stack config loading.
"""

from instatus_provider.configs.base import ProviderSettings
from instatus_provider.configs.environment import ProgramConfig, get_config

__all__ = ["ProviderSettings", "ProgramConfig", "get_config"]
