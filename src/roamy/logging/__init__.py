from roamy.logging.factory import DefaultLoggerFactory
from roamy.logging.helpers import JsonLogFormatter, PlainLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'PlainLogFormatter',
    'get_logger',
    'setup_base_logger',
    'trace_io',
]
