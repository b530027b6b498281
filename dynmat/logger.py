"""module for logging dynmat file and stream events
"""
from datetime import datetime
import warnings

from .dynmat_warnings import DynmatWarning
from .errors import DynmatError


class Logger(object):
    """a basic class for logging timed events, such as reading or writing
    a container, to a file and/or the screen.

    Args:
        filename (`str`): Filename to write logged events to. If `True`, no file
            is created and events are echoed to standard out. If `False` or
            `None`, events are only echoed when `echo` is `True`.
        echo (`bool`): Flag to cause logged events to be echoed to the screen.

    Example::

        logger = dynmat.Logger("dynmat.log", echo=True)
        logger.log("reading vec.txt")
        ...
        logger.log("reading vec.txt")  # writes the elapsed time

    """

    def __init__(self, filename, echo=False):
        self.items = {}
        self.echo = bool(echo)
        self.f = None
        if filename is True:
            self.echo = True
            self.filename = None
        elif filename:
            self.filename = str(filename)
            self.f = open(self.filename, "w")
            self.statement("opening {0} for logging".format(self.filename))
        else:
            self.filename = None

    def _emit(self, s):
        if self.echo:
            print(s, end="")
        if self.f is not None and not self.f.closed:
            self.f.write(s)
            self.f.flush()

    def statement(self, phrase):
        """log a one-time statement

        Args:
            phrase (`str`): statement to log

        """
        self._emit("{0} {1}\n".format(datetime.now(), phrase))

    def log(self, phrase):
        """log the start or the end of an event.

        Args:
            phrase (`str`): event to log

        Note:
            The first time `phrase` is passed the start time is saved.
            The second time, the elapsed time is written and the event
            is forgotten.
        """
        t = datetime.now()
        if phrase in self.items:
            start = self.items.pop(phrase)
            self._emit("{0} finished: {1} took: {2}\n".format(t, phrase, t - start))
        else:
            self._emit("{0} starting: {1}\n".format(t, phrase))
            self.items[phrase] = t

    def warn(self, message):
        """write a warning to the log and issue a `DynmatWarning`

        Args:
            message (`str`): warning statement to log

        """
        s = "{0} WARNING: {1}\n".format(datetime.now(), message)
        self._emit(s)
        warnings.warn(message, DynmatWarning, stacklevel=2)

    def lraise(self, message, error=DynmatError):
        """log an error, close the log file, then raise it

        Args:
            message (`str`): error statement to log and raise
            error (`type`,`Exception`): the `DynmatError` subclass to raise,
                or an already-raised exception to re-raise as is.
                Default is `DynmatError`

        """
        s = "{0} ERROR: {1}\n".format(datetime.now(), message)
        self._emit(s)
        self.close()
        if isinstance(error, BaseException):
            raise error
        raise error(message)

    def close(self):
        """close the log file, if one is open"""
        if self.f is not None and not self.f.closed:
            self.f.close()
