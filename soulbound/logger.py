"""Module for initializing settings related to the built-in soulbound logger
Functions:
-get_logger
-overwrite_logger_level"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.WARNING

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(os.getenv('HOST_NAME', 'Node'))

"""
Custom Styling
"""

coloredlogs.DEFAULT_LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}
coloredlogs.DEFAULT_FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'hostname': {'color': 'magenta'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
    'programname': {'color': 'cyan'}
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format)
        )


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


_configured = False


def _configure_root():
    global _configured
    if _configured:
        return

    handlers = [ColoredStreamHandler()]

    filedir = os.getenv('LOG_DIR')
    if filedir:
        os.makedirs(filedir, exist_ok=True)
        filename = os.path.join(filedir, '{}.log'.format(os.getenv('HOST_NAME', 'soulbound')))
        handler = logging.FileHandler(filename, delay=True)
        handler.setFormatter(logging.Formatter(format))
        handlers.append(handler)

    root = logging.getLogger('soulbound')
    for handler in handlers:
        root.addHandler(handler)
    root.propagate = False

    _configured = True


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    _configure_root()

    log = logging.getLogger('soulbound.{}'.format(name) if name else 'soulbound')
    log.setLevel(_LOG_LVL)

    return log


def overwrite_logger_level(level):
    global _LOG_LVL
    _LOG_LVL = level

    for name in logging.Logger.manager.loggerDict.keys():
        if name.startswith('soulbound'):
            log = logging.getLogger(name)
            log.setLevel(level)
