# Some defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SEPARATOR = " "

# Environment variables read by the CLI.
LOG_LEVEL_ENV_VAR = "EACH_CONS_LOG_LEVEL"
JSON_LOGS_ENV_VAR = "EACH_CONS_JSON_LOGS"
