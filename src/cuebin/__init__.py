import logging.config

# Reports go to stdout, so log messages stay on stderr
logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"simple": {"format": "%(message)s"}},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "root": {"level": "WARNING", "handlers": ["stderr"]},
            "cuebin": {"level": "NOTSET", "propagate": True},
        },
    }
)
