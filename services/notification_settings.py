"""
Outcome notification settings
Turns the `notification` section of the settings file into notifiers arguments
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

TELEGRAM_REQUIRED = ('token', 'chat_id')
EMAIL_REQUIRED = ('host', 'from', 'to')


@dataclass
class NotificationProvider:
    """A notifiers provider name and the arguments passed to its notify()"""
    provider_name: str
    enabled: bool = False
    config: Dict[str, Any] = field(default_factory=dict)

    def is_valid(self) -> bool:
        return self.enabled and bool(self.config)


class NotificationSettings:
    """Reads telegram and email settings; an incomplete provider stays disabled"""

    def __init__(self, notification_config: Dict[str, Any]):
        self.notification_config = notification_config if isinstance(notification_config, dict) else {}

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.notification_config.get(name)
        return section if isinstance(section, dict) else {}

    def telegram(self) -> NotificationProvider:
        section = self._section('telegram')

        arguments = {}
        if all(section.get(key) for key in TELEGRAM_REQUIRED):
            arguments = {
                'token': str(section['token']),
                'chat_id': str(section['chat_id']),
                'parse_mode': 'markdown'
            }

        return NotificationProvider('telegram', bool(section.get('enabled', False)), arguments)

    def email(self) -> NotificationProvider:
        section = self._section('email')

        arguments = {}
        if all(section.get(key) for key in EMAIL_REQUIRED):
            arguments = {
                'host': section['host'],
                'port': section.get('port', 587),
                'tls': bool(section.get('tls', True)),
                'from': section['from'],
                'to': section['to']
            }
            # SMTP login only when a username is set
            if section.get('username'):
                arguments['username'] = section['username']
                arguments['password'] = section.get('password', '')

        return NotificationProvider('email', bool(section.get('enabled', False)), arguments)

    def providers(self) -> List[NotificationProvider]:
        return [self.telegram(), self.email()]
