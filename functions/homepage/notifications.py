"""
Best-effort webhook notifications for new messages and contact submissions.

The payload shape ({"msg_type": "text", "content": {"text": ...}}) is the
one accepted by Feishu/Lark custom bots; DingTalk and WeCom bots accept the
same text envelope with minor variations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

MESSAGE_EVENT = "message"
CONTACT_EVENT = "contact"


def build_notification_text(kind: str, record: dict) -> Optional[str]:
    """
    Returns the "<title>\\n\\n<body>" text for an event, or None for an unknown kind.
    """
    if kind == MESSAGE_EVENT:
        title = "新留言通知"
        email = record.get("email") or "未提供邮箱"
        body = f"收到来自 {record.get('name')} ({email}) 的新留言：\n{record.get('content')}"
    elif kind == CONTACT_EVENT:
        title = "新联系表单提交"
        body = (
            f"收到来自 {record.get('name')} ({record.get('email')}) 的联系表单：\n"
            f"{record.get('message')}"
        )
    else:
        return None
    return f"{title}\n\n{body}"


@dataclass
class NotificationDispatcher:
    """Posts event summaries to a single configured webhook URL."""

    url: Optional[str] = None
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    def dispatch(self, kind: str, record: dict) -> bool:
        """
        Send one notification. Never raises; returns True only if the webhook accepted it.
        """
        if not self.enabled:
            logger.info("Notification webhook not configured, skipping %s event", kind)
            return False

        text = build_notification_text(kind, record)
        if text is None:
            logger.warning("Unknown notification event kind %r, skipping", kind)
            return False

        payload = {"msg_type": "text", "content": {"text": text}}
        try:
            response = requests.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException:
            logger.exception("Failed to send %s notification", kind)
            return False

        logger.info("Sent %s notification", kind)
        return True
