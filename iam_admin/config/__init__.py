"""Configuration module for the IAM user-admin client."""
from .settings import IAMSettings, load_settings

__all__ = ["IAMSettings", "load_settings"]
