from dataclasses import dataclass

from src.shop.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
