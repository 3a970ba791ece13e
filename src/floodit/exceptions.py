class BaseFloodItError(Exception):
    pass


class InvalidConfigurationError(BaseFloodItError, ValueError):
    pass


class OutOfBoundsError(BaseFloodItError, IndexError):
    pass


class InvalidColourError(BaseFloodItError, ValueError):
    pass
