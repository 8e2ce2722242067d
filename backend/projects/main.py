from projects.core.config import settings
from projects.core.logging import configure_logging, logger
from projects.db.session import init_db
from projects.services.projects import ProjectService

def create_service() -> ProjectService:
    configure_logging(settings.ENV)

    # Ensure tables exist for dev-only convenience; in prod the schema is managed externally
    if settings.ENV == "dev":
        init_db()

    logger.info("service_ready", env=settings.ENV)
    return ProjectService()
