"""
Analytics Service - Pass-through logging of client-side tracking events
"""

from typing import Any, Dict, Optional
import logging

from reservation_api.models import to_iso, utc_now

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Records analytics events in the service log. Events are never rejected."""

    def __init__(self, clock=utc_now):
        self.clock = clock

    def track_event(self, event_name: Any, event_params: Any = None,
                    timestamp: Optional[Any] = None, ip: Optional[str] = '') -> Dict[str, Any]:
        event = {
            'event': event_name,
            'params': event_params,
            'timestamp': timestamp or to_iso(self.clock()),
            'ip': ip or '',
        }
        logger.info(f"Analytics event tracked: {event}")
        return event
