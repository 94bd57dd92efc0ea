#!/usr/bin/env python3
"""Basic usage example"""

from logstack import Logger, LoggerBuilder, LogLevel, Registry
from logstack.formatters import LineFormatter
from logstack.handlers import StreamHandler
from logstack.processors import PlaceholderProcessor, ThreadInfoProcessor

def main():
    # Application-wide logger printing everything from NOTICE up
    app = (LoggerBuilder()
        .with_name("app")
        .with_handler(StreamHandler(level=LogLevel.NOTICE, formatter=LineFormatter()))
        .with_processor(ThreadInfoProcessor())
        .build())

    # Component logger: prints its own debug output, forwards everything to app
    db = (LoggerBuilder()
        .with_name("app.db")
        .with_console(level=LogLevel.DEBUG, colored=True)
        .with_processor(PlaceholderProcessor())
        .with_parent(app)
        .build())

    Registry.add_logger(app)
    Registry.add_logger(db)

    db.debug("Connecting to {host}", {"host": "db.local"})
    db.warning("Slow query took {ms} ms", {"ms": 812})   # also printed by app, channel "app.db"
    Registry.get_instance("app").info("Application started")

    Logger.use_microsecond_timestamps(False)
    app.error("This record has whole-second precision")

    db.close()
    app.close()

if __name__ == "__main__":
    main()
