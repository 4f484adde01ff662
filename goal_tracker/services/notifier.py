"""
Daily reminder e-mails through the Resend HTTP API.

A single ``ReminderNotifier`` is built in the app lifespan and handed to
routes via ``get_notifier``.
"""
import html
import logging
from typing import Optional, Sequence

import requests
from fastapi import Request

logger = logging.getLogger(__name__)

RESEND_URL = "https://api.resend.com/emails"
SUBJECT = "Your Daily Goals Await"

CATEGORY_EMOJI = {
    "workout": "💪",
    "reading": "📚",
    "personal": "✨",
    "health": "❤️",
    "learning": "🧠",
    "meditation": "🧘",
    "finance": "💰",
    "social": "👥",
    "creative": "🎨",
}
DEFAULT_EMOJI = "📌"

def category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, DEFAULT_EMOJI)

def render_text(goals: Sequence) -> str:
    goal_list = "\n".join(f"- {category_emoji(g.category)} {g.name}" for g in goals)
    return f"Good morning! Here are your goals for today:\n\n{goal_list}\n\nMake today count!"

def render_html(goals: Sequence) -> str:
    items = "".join(
        f"<li>{category_emoji(g.category)} <strong>{html.escape(g.name)}</strong></li>"
        for g in goals
    )
    return (
        '<div style="font-family: -apple-system, BlinkMacSystemFont, \'Segoe UI\', Roboto, sans-serif; '
        'max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #4f46e5;">Good Morning!</h2>'
        '<p style="color: #6b7280;">Here are your goals for today:</p>'
        f'<ul style="line-height: 2; list-style: none; padding: 0;">{items}</ul>'
        '<p style="color: #5b21b6; font-weight: 500;">Make today count! 🚀</p>'
        '<hr style="border: none; border-top: 1px solid #e5e7eb;" />'
        '<p style="font-size: 12px; color: #9ca3af;">Sent from Goal Tracker</p>'
        "</div>"
    )

class ReminderNotifier:
    def __init__(self, api_key: Optional[str], sender: str, timeout: float = 10.0):
        self.api_key = api_key
        self.sender = sender
        self.timeout = timeout
        self.session = requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def send_reminder(self, to: str, goals: Sequence) -> bool:
        """Returns False instead of raising; the caller only needs success/failure."""
        if not self.configured:
            logger.error("Resend API key not configured")
            return False

        payload = {
            "from": self.sender,
            "to": [to],
            "subject": SUBJECT,
            "text": render_text(goals),
            "html": render_html(goals),
        }
        try:
            response = self.session.post(
                RESEND_URL,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Email error: %s", e)
            return False

        if response.status_code not in (200, 201):
            logger.error("Email send error: %s %s", response.status_code, response.text)
            return False

        logger.info("Reminder sent to %s with %d goals", to, len(goals))
        return True

    def close(self) -> None:
        self.session.close()

def get_notifier(request: Request) -> ReminderNotifier:
    return request.app.state.notifier
