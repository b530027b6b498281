"""warning category for dynmat and the one-line format used to show it"""
import warnings


def warning_on_one_line(message, category, filename, lineno, file=None, line=None):
    """format a warning as `file:line: Category: message` on a single line"""
    return "%s:%s: %s: %s\n" % (filename, lineno, category.__name__, message)


warnings.formatwarning = warning_on_one_line


class DynmatWarning(Warning):
    """non-fatal condition, e.g. unread data left in an ASCII file"""

    pass
