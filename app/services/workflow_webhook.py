"""
Workflow automation webhook - posts marketplace events to an external
automation endpoint (n8n or similar).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class WorkflowNotifier:
    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.webhook_url = webhook_url if webhook_url is not None else settings.WORKFLOW_WEBHOOK_URL
        self.timeout = timeout or settings.WORKFLOW_WEBHOOK_TIMEOUT
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def notify(self, event: str, data: Dict[str, Any]) -> bool:
        """
        Send an event to the webhook.

        Returns True when the webhook accepted the event. Failures are logged
        and reported as False; they never propagate to the caller.
        """
        if not self.enabled:
            return False

        payload = {
            "event": event,
            "data": {**data, "timestamp": datetime.now(timezone.utc).isoformat()},
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.webhook_url, json=payload)

            if response.is_success:
                logger.info(f"Workflow webhook accepted '{event}'")
                return True

            logger.warning(
                f"Workflow webhook returned status {response.status_code} for '{event}': {response.text}"
            )
            return False

        except httpx.TimeoutException:
            logger.warning(f"Workflow webhook timed out for '{event}'")
            return False
        except httpx.RequestError as e:
            logger.warning(f"Workflow webhook request failed for '{event}': {e}")
            return False


def notify_suppliers_matched(result: Dict[str, Any], notifier: Optional[WorkflowNotifier] = None) -> bool:
    notifier = notifier or WorkflowNotifier()
    return notifier.notify(
        "suppliers_matched",
        {
            "rfqId": result["rfq"]["id"],
            "rfqTitle": result["rfq"]["title"],
            "totalMatches": result["total_matches"],
            "supplierIds": [m["id"] for m in result["matches"]],
        },
    )


def notify_rfq_status_changed(
    rfq_id: int, previous: str, current: str, notifier: Optional[WorkflowNotifier] = None
) -> bool:
    notifier = notifier or WorkflowNotifier()
    return notifier.notify(
        "rfq_status_changed",
        {"rfqId": rfq_id, "previousStatus": previous, "status": current},
    )
