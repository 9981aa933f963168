import sys
import time
from dataclasses import dataclass

from loadingbar.logger.logger_config import logger

DEFAULT_DURATION = 5
DEFAULT_PROGRESS_CHAR = "#"
DEFAULT_LENGTH = 20
DEFAULT_PREFIX = ""


@dataclass(frozen=True)
class LoadingBar:
    """
    A fixed-duration loading bar drawn on a single terminal line.

    Args:
        duration (float): Seconds the whole animation takes.
        progress_char (str): Character used for the filled part of the bar.
        length (int): Width of the bar in characters, also the number of frames.
        prefix (str): Text printed before the bar (Loading.. [####    ]).
    """

    duration: float = DEFAULT_DURATION
    progress_char: str = DEFAULT_PROGRESS_CHAR
    length: int = DEFAULT_LENGTH
    prefix: str = DEFAULT_PREFIX

    @classmethod
    def new(cls):
        """Returns a loading bar with the default configuration."""
        return cls()

    @classmethod
    def new_with_config(cls, duration, progress_char, length, prefix):
        """Returns a loading bar with the given configuration. Nothing is validated here."""
        return cls(duration=duration, progress_char=progress_char, length=length, prefix=prefix)

    @property
    def frame_interval(self):
        # length == 0 raises ZeroDivisionError
        return self.duration / self.length

    def frame(self, filled):
        """Returns the bar for the given fill level, without the line terminator."""
        bar = f"{self.progress_char * filled}{' ' * (self.length - filled)}"
        return f"{self.prefix}[{bar}]"

    def render(self, stream=None):
        """
        Draws the bar frame by frame, blocking until the full duration has passed.

        Each frame overwrites the previous one with a carriage return; the last
        frame ends the line. The sleep also runs after the last frame.
        """
        each_duration = self.frame_interval
        if stream is None:
            stream = sys.stdout

        logger.debug(
            f"Rendering {self.length} frames of '{self.progress_char}' every {each_duration:.3f}s"
        )

        for i in range(1, self.length + 1):
            stream.write(self.frame(i))
            stream.flush()

            if i != self.length:
                stream.write("\r")
            else:
                stream.write("\n")
            stream.flush()
            time.sleep(each_duration)

        logger.debug("Loading bar finished")

    start = render


def create_default():
    return LoadingBar.new()


def create_with_config(duration, progress_char, length, prefix):
    return LoadingBar.new_with_config(duration, progress_char, length, prefix)


if __name__ == "__main__":
    bar = create_with_config(2, "*", 30, "Loading.. ")
    bar.render()

    print("Main task completed!")
