from .option import (
    Option,
    Some,
    NONE,
    from_nullable,
    OptionError,
    EmptyValueError,
    NonEmptyValueError,
    ExpectationError,
)
from .logger import ConsoleLogger, default_logger
