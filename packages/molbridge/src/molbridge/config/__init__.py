from molbridge.config.loader import AdapterSection, Config, ConfigError, LoggingSection, load_config

__all__ = ["AdapterSection", "Config", "ConfigError", "LoggingSection", "load_config"]
