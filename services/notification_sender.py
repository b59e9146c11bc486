"""
Notification sender service
Reports the search outcome via configured providers using notifiers library
"""
import logging
from dataclasses import dataclass
from typing import Optional, List, Tuple
from notifiers import get_notifier
from services.notification_settings import NotificationProvider

logger = logging.getLogger(__name__)


@dataclass
class NotificationResult:
    """Result of notification attempt"""
    provider: str
    success: bool
    error_message: Optional[str] = None


class NotificationSender:
    """Service for sending outcome notifications via configured providers"""

    def __init__(self, providers: List[NotificationProvider]):
        self.providers = providers

    def is_enabled(self) -> bool:
        return any(provider.is_valid() for provider in self.providers)

    def send_via_provider(self, provider: NotificationProvider, title: str,
                          message: str) -> Tuple[bool, Optional[str]]:
        """Send notification via specific provider using notifiers library"""
        try:
            notifier = get_notifier(provider.provider_name)

            provider_config = provider.config.copy()
            if provider.provider_name == "email":
                provider_config["subject"] = f"fixmygento: {title}"
                provider_config["message"] = message
            else:
                provider_config["message"] = f"*{title}*\n\n{message}"

            result = notifier.notify(**provider_config)

            # Check result status
            if result and hasattr(result, 'status'):
                if str(result.status).lower() == 'success':
                    return True, None
                errors = getattr(result, 'errors', None) or ['Unknown error']
                return False, f"Notification failed: {', '.join(errors)}"
            return True, None

        except Exception as e:
            return False, f"Failed to send {provider.provider_name} notification: {str(e)}"

    def send(self, title: str, message: str) -> List[NotificationResult]:
        """Send to every valid provider; failures are reported, never raised"""
        results = []

        for provider in self.providers:
            if provider.is_valid():
                success, error = self.send_via_provider(provider, title, message)
                results.append(NotificationResult(provider.provider_name, success, error))

        self.log_notification_results(results)
        return results

    def send_search_success(self, strategy_name: str, attempts: int,
                            working_directory: str) -> List[NotificationResult]:
        title = "Success"
        message = (
            f"Strategy \"{strategy_name}\" worked after {attempts} attempt(s).\n"
            f"Project: {working_directory}"
        )
        return self.send(title, message)

    def send_search_exhausted(self, attempts: int, working_directory: str,
                              last_error: Optional[str] = None) -> List[NotificationResult]:
        title = "All strategies failed"
        message = (
            f"None of the {attempts} strategies worked.\n"
            f"Project: {working_directory}"
        )
        if last_error:
            message += f"\nLast error: {last_error}"
        return self.send(title, message)

    def log_notification_results(self, results: List[NotificationResult]):
        """Log results of notification attempts"""
        if not results:
            logger.debug("No notification providers configured - notification skipped")
            return

        successful = [r for r in results if r.success]

        if successful:
            providers = ", ".join(r.provider for r in successful)
            logger.info("Notification sent via %d/%d providers: %s", len(successful), len(results), providers)
        else:
            providers = ", ".join(r.provider for r in results)
            logger.warning("Notification failed via all %d providers: %s", len(results), providers)

        for result in results:
            if result.error_message:
                logger.warning("  - %s: %s", result.provider, result.error_message)
