"""Utility helpers."""

from .env import load_config, log_level_from_env, setup_logging

__all__ = ['load_config', 'log_level_from_env', 'setup_logging']
