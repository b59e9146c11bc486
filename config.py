#!/usr/bin/env python3
"""
Configuration manager for fixmygento
Loads YAML settings and dotenv secrets, resolving every path against the home directory
"""
import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import dotenv_values


CONFIG_DIR_NAME = ".fixmygento"
SECTIONS = ('container', 'audio', 'notification')


class FixConfig:
    """Manages the fixmygento settings in YAML format"""

    def __init__(self, config_file: Optional[str] = None, home: Optional[Path] = None):
        self.home = Path(home) if home else Path.home()
        self.config_dir = self.home / CONFIG_DIR_NAME
        self.config_file = Path(config_file) if config_file else self.config_dir / "config.yaml"
        self.secrets_file = self.config_dir / "secrets.env"
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """Load settings on top of defaults; a malformed file falls back to defaults"""
        defaults = self.get_default_config()

        if not self.config_file.exists():
            return defaults

        try:
            content = self.config_file.read_text().strip()
            if not content:
                return defaults

            settings = yaml.safe_load(content)

            if settings is None or not isinstance(settings, dict):
                print(f"Warning: Ignoring {self.config_file}: expected a mapping")
                return defaults

            if self.secrets_file.exists():
                secrets = dotenv_values(self.secrets_file)
                settings = self._merge_secrets(settings, secrets)

            merged = self._deep_merge(defaults, settings)
            return self._restore_invalid_sections(merged, defaults)

        except (yaml.YAMLError, OSError) as e:
            print(f"Warning: Error loading settings from {self.config_file}: {str(e)}")
            return defaults

    def get_default_config(self) -> Dict[str, Any]:
        return {
            'container': {
                'compose_command': 'docker-compose',
                'service': 'fpm',
                'cli': 'bin/magento'
            },
            'log_file': str(self.home / ".fixmygento.log"),
            'audio': {
                'enabled': True,
                'file': str(self.config_dir / "loop.mp3"),
                'player': 'mpg123 --loop -1 -q'
            },
            'notification': {
                'telegram': {
                    'enabled': False,
                    'token': '',
                    'chat_id': ''
                },
                'email': {
                    'enabled': False,
                    'host': '',
                    'port': 587,
                    'tls': True,
                    'from': '',
                    'to': '',
                    'username': '',
                    'password': ''
                }
            }
        }

    def _merge_secrets(self, config, secrets):
        """Merge secrets into config by replacing ${VAR} placeholders"""
        def replace_vars(obj):
            if isinstance(obj, str):
                for key, value in secrets.items():
                    if value is not None:
                        obj = obj.replace(f"${{{key}}}", value)
                return obj
            elif isinstance(obj, dict):
                return {k: replace_vars(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [replace_vars(item) for item in obj]
            else:
                return obj

        return replace_vars(config)

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _restore_invalid_sections(self, merged: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
        """Sections must stay mappings; `audio: false` is shorthand for `enabled: false`"""
        for section in SECTIONS:
            value = merged.get(section)
            if isinstance(value, dict):
                continue
            if isinstance(value, bool) and 'enabled' in defaults[section]:
                merged[section] = dict(defaults[section], enabled=value)
                continue
            print(f"Warning: Ignoring '{section}' in {self.config_file}: expected a mapping, got {value!r}")
            merged[section] = copy.deepcopy(defaults[section])
        return merged

    def _resolve_path(self, value: str) -> Path:
        """Expand ~ against the configured home, not the process environment"""
        if value == "~" or value.startswith("~/"):
            return self.home / value[2:]
        return Path(value)

    # Container settings
    @property
    def compose_command(self) -> str:
        return str(self.config['container']['compose_command'])

    @property
    def service(self) -> str:
        return str(self.config['container']['service'])

    @property
    def cli(self) -> str:
        return str(self.config['container']['cli'])

    # Attempt log
    @property
    def log_file(self) -> Path:
        return self._resolve_path(str(self.config['log_file']))

    # Ambient audio
    @property
    def audio_enabled(self) -> bool:
        return bool(self.config['audio'].get('enabled', True))

    @property
    def audio_file(self) -> Path:
        return self._resolve_path(str(self.config['audio']['file']))

    @property
    def audio_player(self) -> str:
        return str(self.config['audio']['player'])

    # Notifications
    @property
    def notification_config(self) -> Dict[str, Any]:
        return self.config.get('notification') or {}

    def summary(self) -> List[str]:
        """Human readable settings, secrets excluded"""
        return [
            f"config file: {self.config_file}{'' if self.config_file.exists() else ' (not found, using defaults)'}",
            f"container: {self.compose_command} exec -T {self.service} {self.cli}",
            f"log file: {self.log_file}",
            f"audio: {self.audio_file if self.audio_enabled else 'disabled'}",
        ]


def default_config_path() -> Optional[str]:
    """Config path override from FIXMYGENTO_CONFIG, if set"""
    return os.environ.get('FIXMYGENTO_CONFIG') or None
