class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    pass


class OutOfRangeError(GameError, IndexError):
    pass


class PreconditionError(LogicError):
    pass
