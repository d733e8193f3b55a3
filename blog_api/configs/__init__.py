from blog_api.configs.settings import (
    API_PREFIX,
    CONFIG_MAP,
    WORDS_PER_MINUTE,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "API_PREFIX",
    "CONFIG_MAP",
    "WORDS_PER_MINUTE",
    "LimiterConfig",
    "file_logger",
    "settings",
]
