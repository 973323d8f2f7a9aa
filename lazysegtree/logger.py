import os
import sys
import json
import datetime
import tempfile
from collections import OrderedDict

DEBUG = 10
INFO = 20
WARN = 30
ERROR = 40

DISABLED = 50


class KVWriter(object):
    """
    Key Value writer
    """
    def writekvs(self, kvs):
        """
        write a dictionary to file

        :param kvs: (dict)
        """
        raise NotImplementedError

    def close(self):
        pass


class SeqWriter(object):
    """
    sequence writer
    """
    def writeseq(self, seq):
        """
        write an array to file

        :param seq: (list)
        """
        raise NotImplementedError


class HumanOutputFormat(KVWriter, SeqWriter):
    def __init__(self, filename_or_file):
        """
        log to a file, in a human readable format

        :param filename_or_file: (str or File) the file to write the log to
        """
        if isinstance(filename_or_file, str):
            self.file = open(filename_or_file, 'wt')
            self.own_file = True
        else:
            assert hasattr(filename_or_file, 'write'), 'expected file or str, got %s' % filename_or_file
            self.file = filename_or_file
            self.own_file = False

    def writekvs(self, kvs):
        if len(kvs) == 0:
            self.file.write('WARNING: tried to write empty key-value dict\n')
            self.file.flush()
            return

        key2str = OrderedDict()
        for key, val in kvs.items():
            key2str[self._truncate(str(key))] = self._truncate(str(val))
        keywidth = max(map(len, key2str.keys()))
        valwidth = max(map(len, key2str.values()))

        # rows keep insertion order, the order in which values were logged
        dashes = '-' * (keywidth + valwidth + 7)
        lines = [dashes]
        for key, val in key2str.items():
            lines.append('| %s | %s |' % (key.ljust(keywidth), val.rjust(valwidth)))
        lines.append(dashes)
        self.file.write('\n'.join(lines) + '\n')
        self.file.flush()

    @classmethod
    def _truncate(cls, string):
        return string[:27] + '...' if len(string) > 30 else string

    def writeseq(self, seq):
        self.file.write(' '.join(seq) + '\n')
        self.file.flush()

    def close(self):
        """
        closes the file
        """
        if self.own_file:
            self.file.close()


class JSONOutputFormat(KVWriter):
    def __init__(self, filename):
        """
        log to a file, in the JSON format, one object per dump

        :param filename: (str) the file to write the log to
        """
        self.file = open(filename, 'wt')

    def writekvs(self, kvs):
        row = OrderedDict()
        for key, value in kvs.items():
            # numpy scalars are not JSON serializable
            if hasattr(value, 'dtype'):
                value = value.tolist()
            row[str(key)] = value
        self.file.write(json.dumps(row) + '\n')
        self.file.flush()

    def close(self):
        """
        closes the file
        """
        self.file.close()


def make_output_format(_format, ev_dir, log_suffix=''):
    """
    return a logger for the requested format

    :param _format: (str) the requested format to log to ('stdout', 'log' or 'json')
    :param ev_dir: (str) the logging directory
    :param log_suffix: (str) the suffix for the log file
    :return: (KVWriter) the logger
    """
    if _format == 'stdout':
        return HumanOutputFormat(sys.stdout)
    os.makedirs(ev_dir, exist_ok=True)
    if _format == 'log':
        return HumanOutputFormat(os.path.join(ev_dir, 'log%s.txt' % log_suffix))
    elif _format == 'json':
        return JSONOutputFormat(os.path.join(ev_dir, 'progress%s.json' % log_suffix))
    else:
        raise ValueError('Unknown format specified: %s' % (_format,))


# ================================================================
# API
# ================================================================

def logkv(key, val):
    """
    Log a value of some diagnostic
    If called many times before dumpkvs(), the last value is used.

    :param key: (Any) save to log this key
    :param val: (Any) save to log this value
    """
    Logger.CURRENT.logkv(key, val)


def logkvs(key_values):
    """
    Log a dictionary of key-value pairs

    :param key_values: (dict) the list of keys and values to save to log
    """
    for key, value in key_values.items():
        logkv(key, value)


def dumpkvs():
    """
    Write all of the pending diagnostics
    """
    Logger.CURRENT.dumpkvs()


def getkvs():
    """
    get the key values logs

    :return: (dict) the logged values
    """
    return Logger.CURRENT.name2val


def log(*args, level=INFO):
    """
    Write the sequence of args, separated by spaces,
    to the console and output files (if you've configured an output file).

    :param args: (list) log the arguments
    :param level: (int) the logging level (can be DEBUG=10, INFO=20, WARN=30, ERROR=40, DISABLED=50)
    """
    Logger.CURRENT.log(*args, level=level)


def debug(*args):
    log(*args, level=DEBUG)


def info(*args):
    log(*args, level=INFO)


def warn(*args):
    log(*args, level=WARN)


def error(*args):
    log(*args, level=ERROR)


def set_level(level):
    """
    Set logging threshold on current logger.

    :param level: (int) the logging level (can be DEBUG=10, INFO=20, WARN=30, ERROR=40, DISABLED=50)
    """
    Logger.CURRENT.set_level(level)


def get_level():
    """
    Get logging threshold on current logger.

    :return: (int) the logging level
    """
    return Logger.CURRENT.level


def get_dir():
    """
    Get directory that log files are being written to.
    will be None if there is no output directory (i.e., if you didn't call configure)

    :return: (str) the logging directory
    """
    return Logger.CURRENT.get_dir()


# ================================================================
# Backend
# ================================================================

class Logger(object):
    # A logger writing to stdout only, used until configure() is called
    DEFAULT = None
    CURRENT = None  # Current logger being used by the free functions above

    def __init__(self, folder, output_formats):
        """
        the logger class

        :param folder: (str) the logging location
        :param output_formats: ([KVWriter]) the list of output formats
        """
        self.name2val = OrderedDict()
        self.level = INFO
        self.dir = folder
        self.output_formats = output_formats

    def logkv(self, key, val):
        self.name2val[key] = val

    def dumpkvs(self):
        """
        Write all of the pending diagnostics
        """
        if self.level == DISABLED:
            self.name2val.clear()
            return
        for fmt in self.output_formats:
            fmt.writekvs(self.name2val)
        self.name2val.clear()

    def log(self, *args, level=INFO):
        if self.level <= level < DISABLED:
            self._do_log(args)

    def set_level(self, level):
        self.level = level

    def get_dir(self):
        return self.dir

    def close(self):
        """
        closes the output files
        """
        for fmt in self.output_formats:
            fmt.close()

    def _do_log(self, args):
        for fmt in self.output_formats:
            if isinstance(fmt, SeqWriter):
                fmt.writeseq(map(str, args))


class _StdoutFormat(HumanOutputFormat):
    # resolves sys.stdout on every write so that redirected streams are honored
    def __init__(self):
        super(_StdoutFormat, self).__init__(sys.stdout)

    @property
    def file(self):
        return sys.stdout

    @file.setter
    def file(self, _):
        pass


Logger.DEFAULT = Logger.CURRENT = Logger(folder=None, output_formats=[_StdoutFormat()])


def configure(folder=None, format_strs=None):
    """
    configure the current logger

    :param folder: (str) the save location (if None, $LAZYSEGTREE_LOGDIR,
        if still None, tempdir/lazysegtree-[date & time])
    :param format_strs: ([str]) the output logging format
        (if None, $LAZYSEGTREE_LOG_FORMAT, if still None, ['stdout', 'log'])
    """
    if folder is None:
        folder = os.getenv('LAZYSEGTREE_LOGDIR')
    if folder is None:
        folder = os.path.join(tempfile.gettempdir(),
                              datetime.datetime.now().strftime("lazysegtree-%Y-%m-%d-%H-%M-%S-%f"))
    assert isinstance(folder, str)
    os.makedirs(folder, exist_ok=True)

    if format_strs is None:
        format_strs = os.getenv('LAZYSEGTREE_LOG_FORMAT', 'stdout,log').split(',')
    output_formats = [make_output_format(f, folder) for f in filter(None, format_strs)]

    level = Logger.CURRENT.level
    Logger.CURRENT = Logger(folder=folder, output_formats=output_formats)
    Logger.CURRENT.set_level(level)
    log('Logging to %s' % folder)


def reset():
    """
    reset the current logger
    """
    if Logger.CURRENT is not Logger.DEFAULT:
        Logger.CURRENT.close()
        Logger.CURRENT = Logger.DEFAULT
        log('Reset logger')


class ScopedConfigure(object):
    def __init__(self, folder=None, format_strs=None):
        """
        Class for using context manager while logging

        usage:
        with ScopedConfigure(folder=None, format_strs=None):
            {code}

        :param folder: (str) the logging folder
        :param format_strs: ([str]) the list of output logging format
        """
        self.dir = folder
        self.format_strs = format_strs
        self.prevlogger = None

    def __enter__(self):
        self.prevlogger = Logger.CURRENT
        configure(folder=self.dir, format_strs=self.format_strs)

    def __exit__(self, *args):
        Logger.CURRENT.close()
        Logger.CURRENT = self.prevlogger


def read_json(fname):
    """
    read a json log file

    :param fname: (str) the file path to read
    :return: ([dict]) one dict per dumpkvs() call
    """
    with open(fname, 'rt') as file_handler:
        return [json.loads(line) for line in file_handler if line.strip()]
