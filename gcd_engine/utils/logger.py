import inspect
from enum import Enum, auto
from gcd_engine.configs.logging import logging_config
from typing import Callable

from typing import Dict, Tuple


class Logger:
    """
    Logging for terminal interface and debugging
    """
    print_func: Callable = print
    timer_mapping: Dict[str, Tuple[int, float]] = dict()

    class Levels(Enum):
        message = auto()
        info = auto()
        warning = auto()
        inform = auto()
        exception = auto()

    class Colors:
        white = '\033[0m'
        red = '\033[91m'
        green = '\033[92m'
        yellow = '\033[93m'

    def __init__(self, msg, level=Levels.message, end_with_nl=True, condition=True):
        calling_frame = inspect.stack()[1]
        self.calling_function_name = calling_frame.function
        self.level = level if isinstance(level, Logger.Levels) else Logger.Levels.info
        self.msg = msg
        self.condition = condition
        if end_with_nl:
            self.end = f'{Logger.Colors.white}\n'
        else:
            self.end = f'{Logger.Colors.white} '

    def log(self, msg_prefix='', in_function: bool = False):
        """
        Log a message with it's logging level to the standard output
        :param msg_prefix: the message level prefix for printing
        :param in_function: Add the calling function name to the message
        """
        if not self.condition:
            return

        match self.level:
            case Logger.Levels.message:  # message
                self.print_func(f'{Logger.Colors.white}{msg_prefix}{self.msg}', end=self.end)
            case Logger.Levels.info:       # info - green
                self.print_func(f'{Logger.Colors.green}{msg_prefix}[INFO] {self.msg}', end=self.end)
            case Logger.Levels.warning:    # warning - yellow
                self.print_func(f'{Logger.Colors.yellow}{msg_prefix}[WARNING] {self.msg}', end=self.end)
            case Logger.Levels.inform:     # does not raise exception - red
                msg = f'{Logger.Colors.red}{msg_prefix}[NOTICE] {self.msg}'
                if in_function:
                    msg += f' in {self.calling_function_name}'
                self.print_func(msg, end=self.end)
            case Logger.Levels.exception:  # exception - red
                msg = f'{Logger.Colors.red}{msg_prefix}[ERROR] {self.msg}'
                if in_function:
                    msg += f' in {self.calling_function_name}'
                self.print_func(msg, end=self.end)
        return

    @classmethod
    def record_time(cls, label: str, elapsed: float):
        """
        Report a measured duration according to the logging configuration
        :param label: A label for the measurement.
        :param elapsed: The duration in seconds.
        """
        if logging_config.PROFILE:
            cls(f'{label}: {elapsed:.6f} seconds', Logger.Levels.info).log()
        if logging_config.PROFILE_SUMMARY:
            n, s = cls.timer_mapping.get(label, (0, 0.0))
            cls.timer_mapping[label] = (n + 1, s + elapsed)

    @classmethod
    def timer_summary(cls):
        if not logging_config.PROFILE_SUMMARY:
            return
        cls('\n======= profile summary ======').log()
        for label, (n, s) in cls.timer_mapping.items():
            cls(f"{label}: {n} runs, avg time: {s / n:.6f} seconds").log()

    @classmethod
    def reset_timers(cls):
        cls.timer_mapping.clear()
