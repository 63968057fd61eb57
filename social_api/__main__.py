import argparse
import logging

import uvicorn

from .config import get_settings
from .database import create_db_engine, create_session_factory, init_db
from .main import configure_logging, create_app
from .seed import seed_database

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="social_api")
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=["serve", "init-db", "seed"],
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "serve":
        logger.info("Server listening on port %s", settings.port)
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
        return

    engine = create_db_engine(settings.database_url)
    init_db(engine)
    if args.command == "seed":
        session_factory = create_session_factory(engine)
        with session_factory() as db:
            seed_database(db)
    engine.dispose()


if __name__ == "__main__":
    main()
