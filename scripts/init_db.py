from famtrack.core.config import settings
from famtrack.core.logging_config import setup_logging
from famtrack.db.base import init_db
if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    init_db()
    print("Database schema created.")
