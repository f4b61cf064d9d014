class ConfigurationError(Exception):
  ...
