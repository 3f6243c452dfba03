from .types import IllegalStateError, InvalidIniFileError
from .utils import initialize_logger
from .support.func import Option
from .shell import Shell, ExecResult

__version__ = '0.3.1'
