import os


ENV_PREFIX = "STREAMWRAP_"

DEFAULT_TIMEOUT = 15000
DEFAULT_TORBOX_TIMEOUT = 30000
DEFAULT_CACHE_TTL = 600
TORBOX_STREMIO_URL = "https://stremio.torbox.app/"


def get_setting(value, default=None):
    val = os.environ.get(ENV_PREFIX + value.upper())
    if not val:
        return default
    if val.lower() == "true":
        return True
    if val.lower() == "false":
        return False
    return val


def get_int_setting(setting, default=0):
    try:
        return int(get_setting(setting, default))
    except (TypeError, ValueError):
        return default


def get_default_timeout():
    return get_int_setting("default_timeout", DEFAULT_TIMEOUT)


def get_torbox_timeout():
    return get_int_setting("torbox_timeout", DEFAULT_TORBOX_TIMEOUT)


def get_cache_ttl():
    return get_int_setting("cache_ttl", DEFAULT_CACHE_TTL)


def is_cache_enabled():
    return get_setting("cache_enabled", True)


def log_sensitive_info():
    return get_setting("log_sensitive_info", False)


def get_torbox_stremio_url():
    return get_setting("torbox_stremio_url", TORBOX_STREMIO_URL)
