# payroll/config.py

import logging

# --- Logging Configuration ---
# Console only; the report itself goes to stdout, diagnostics to stderr.
LOG_LEVEL = logging.WARNING  # logging.INFO shows the pay period summary, logging.DEBUG every line
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'stream': 'ext://sys.stderr',
            'level': logging.DEBUG,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
}

# --- Application Settings ---
DEFAULT_CURRENCY = "ILS" # display only, amounts carry no currency type
COMPANY_NAME = "Payroll Demo"
