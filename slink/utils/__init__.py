from slink.utils.config import app_env, app_name, app_prefix, load_config
from slink.utils.helpers import get_short_url, validate_url, utc_now, isoformat_millis, require_environment
from slink.utils.ids import MonotonicIdSource, epoch_millis
from slink.utils.shortener import generate_shortcode
from slink.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'get_short_url',
    'validate_url',
    'utc_now',
    'isoformat_millis',
    'require_environment',
    'MonotonicIdSource',
    'epoch_millis',
    'initialize_logging',
]
