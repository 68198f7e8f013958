from __future__ import annotations

from beanwire import Inject, component
from examples.ex_01_component_scan.services import DatabaseService, EmailService, LoggingService, now


@component
class UserComponent:
    database_service: Inject[DatabaseService]
    email_service: Inject[EmailService]
    logging_service: Inject[LoggingService]

    def perform_all_operations(self) -> None:
        self.logging_service.log(f"operations started at {now()}")
        self.database_service.save("...a lot of user information...")
        self.email_service.send_email("SENT")
