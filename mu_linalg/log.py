"""
Stacked step logger for computation traces.

Operations called with ``do_log=True`` write LaTeX lines through :func:`log`.
Lines go to the logger on top of the stack; the bottom one is
``global_logger``, which echoes to stdout while ``_auto_print`` is set and
keeps no history of its own.
Nested loggers (``nest_logger``, ``capture_logs``) divert the lines of a
block so they can be collected instead of printed.
"""

from .fmt import pcformat


class Logger:
    accum: list[str]
    level_limit: int = 0
    collect: bool = True
    _auto_print: bool = False

    def __init__(self, accum: list[str] = None, level_limit: int = 0):
        self.accum = accum if accum is not None else []
        self.level_limit = level_limit

    def log(self, message: str, level=0):
        if level > self.level_limit:
            return
        if self.collect:
            self.accum.append(message)
        if self._auto_print:
            print(message)

    def __len__(self):
        return len(self.accum)

    def __str__(self):
        return "\n".join(self.accum)


def push_logger(logger=None):
    global current_logger
    if logger is None:
        logger = Logger()
    logger_stack.append(logger)
    current_logger = logger


def pop_logger() -> Logger:
    global current_logger
    if len(logger_stack) <= 1:
        raise ValueError("The global logger cannot be popped")
    ret = logger_stack.pop()
    current_logger = logger_stack[-1]
    return ret


def set_auto_print(enabled: bool):
    """Toggle echoing of top-level step lines to stdout."""
    global_logger._auto_print = enabled


def log(message: str, *args, level=0):
    current_logger.log(pcformat(message, *args), level)


class LoggerGuard:
    def __init__(self, logger=None, append_logs: list[str] = None):
        self.logger = logger
        self.append_logs = append_logs

    def __enter__(self):
        push_logger(self.logger)
        return current_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        lg = pop_logger()
        if self.append_logs is not None and len(lg) > 0:
            self.append_logs.append(str(lg))
        return False


def nest_logger(logger=None):
    return LoggerGuard(logger)


def nest_appending_logger(logs_list: list[str]):
    return LoggerGuard(append_logs=logs_list)


def ignore_log(f, *args, **kwargs):
    with nest_logger():
        return f(*args, **kwargs)


def capture_logs(f, *args, **kwargs) -> str:
    with nest_logger() as lg:
        f(*args, **kwargs)
    return str(lg)


current_logger = None
logger_stack = []
global_logger = Logger()
global_logger._auto_print = True
global_logger.collect = False
push_logger(global_logger)
