# redline/exceptions.py

class RedlineError(Exception):
    pass


class InsufficientSamplesError(RedlineError, ValueError):
    pass


class InvalidSampleError(RedlineError, ValueError):
    pass


class InvalidConfigError(RedlineError, ValueError):
    pass
