from apscheduler.schedulers.blocking import (  # type: ignore[import-untyped]
    BlockingScheduler,
)
from apscheduler.triggers.interval import (  # type: ignore[import-untyped]
    IntervalTrigger,
)


def purge_sessions() -> int:
    from app.api.deps import get_db_context
    from app.services import auth as auth_service

    with get_db_context() as session:
        return auth_service.purge_expired_sessions(session=session)


if __name__ == "__main__":
    from app.core.config import settings
    from app.logging_.logger import setup_logger

    setup_logger("scheduler", log_dir=settings.LOG_DIR)

    scheduler = BlockingScheduler()
    scheduler.add_job(
        func=purge_sessions,
        trigger=IntervalTrigger(hours=1),
        id="purge_expired_sessions",
    )
    scheduler.start()
