"""klaw-faker: typed facade over the Faker engine.

Flat imports (preferred):
    from klaw_faker import fake, Factory, Generator

Configuration and logging:
    from klaw_faker import init, get_config, configure_logging

Every generator method forwards to Faker and narrows the result to its
declared type. Faker owns the randomness and the locale data.
"""

from klaw_faker._config import FakerConfig, get_config, init
from klaw_faker._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from klaw_faker.errors import InvalidLocale, InvalidLocaleError
from klaw_faker.factory import Factory
from klaw_faker.functions import fake
from klaw_faker.generator import Generator

__all__ = [
    # Factory
    'Factory',
    # Config
    'FakerConfig',
    'Generator',
    # Errors
    'InvalidLocale',
    'InvalidLocaleError',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'fake',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
]
