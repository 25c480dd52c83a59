"""
Default settings. Override these with settings in the module pointed to
by the REGISTRY_HTTP_CONFIG environment variable.
"""

####################
# CORE             #
####################

DEBUG = False

#########
# JSON  #
#########

# Content type sent with every JSON response.
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Encoder class used to serialize JSON responses, as a dotted path.
# Must be a subclass of `json.JSONEncoder`.
JSON_ENCODER = "registry_http.utils.request.JSONEncoder"

# Object keys renamed in every JSON response, at every nesting depth.
#   `krate` is what Python code names a crate, since `crate` is the wire name.
RENAMED_JSON_KEYS = {"krate": "crate"}

##########
# ERRORS #
##########

# Status of responses pre-rendered for human errors. Cargo reads the error
#   detail from the body and expects a successful status.
HUMAN_ERROR_STATUS = 200

###########
# LOGGING #
###########

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "loggers": {
        "registry_http": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
