import logging
import sys

from colorama import Fore, Style

# Define a new log level for success
SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


# Custom success logging function
def success(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL):
        self._log(SUCCESS_LEVEL, message, args, **kwargs)


logging.Logger.success = success

LEVEL_COLORS = {
    "SUCCESS": Fore.GREEN,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED,
    "WARNING": Fore.YELLOW,
}


# Custom logging handler to apply color
class ColorizingStreamHandler(logging.StreamHandler):
    def __init__(self, stream=None):
        super().__init__(stream)
        self._follow_stderr = stream is None

    def emit(self, record):
        # Resolve stderr per record so a replaced sys.stderr is honoured
        stream = sys.stderr if self._follow_stderr else self.stream
        try:
            log_message = self.format(record)
            color = LEVEL_COLORS.get(record.levelname)
            if color:
                log_message = f"{color}{log_message}{Style.RESET_ALL}"

            stream.write(log_message + self.terminator)
            stream.flush()
        except Exception:
            self.handleError(record)


logger = logging.getLogger("LOADINGBAR")
logger.setLevel(logging.INFO)

console_handler = ColorizingStreamHandler()
console_handler.setLevel(logging.DEBUG)

formatter = logging.Formatter("[%(asctime)s] - %(name)s - %(levelname)s - %(message)s")
console_handler.setFormatter(formatter)

logger.addHandler(console_handler)
