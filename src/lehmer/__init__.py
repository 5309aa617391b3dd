__author__ = "guilherme"
__version__ = "0.1.0"
__email__ = "guilherme@dsv.su.se"
__description__ = "Lehmer codes: factorial number system ranks for ordered charsets"
__uri__ = "https://github.com/guidj/lehmer"

import logging.config

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "default": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "loggers": {"": {"handlers": ["default"], "level": "INFO", "propagate": True}},
    }
)
