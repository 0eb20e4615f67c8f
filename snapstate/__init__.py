from loguru import logger

# Library default: silent until the application calls configure_logging().
logger.disable("snapstate")
