from dataclasses import dataclass

from .configurable import Configurable


@dataclass
class LogConfig(Configurable):
    PROFILE: bool = False               # print the duration of every timed call
    PROFILE_SUMMARY: bool = False       # accumulate durations per label for Logger.timer_summary()


logging_config: LogConfig = LogConfig()
