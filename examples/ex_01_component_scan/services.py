from __future__ import annotations

from datetime import datetime, timezone

from beanwire import component


@component
class LoggingService:
    def log(self, message: str) -> None:
        print(f"[LOG] {message}")


@component
class EmailService:
    def send_email(self, message: str) -> None:
        print(f"Sending email: {message}")


@component
class DatabaseService:
    # Declaring `email_service: Inject[EmailService]` here would move this
    # class into the second registration pass next to UserComponent, and
    # UserComponent could then be created before it.

    def save(self, data: str) -> None:
        print(f"Saving data to database: {data}")


def now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()
