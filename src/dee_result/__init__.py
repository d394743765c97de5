"""dee-result: Either and Result types with guards for async Python 3.13+.

Flat imports (preferred):
    from dee_result import Either, Left, Right, run_guard, run_s_guard
    from dee_result import Result, Ok, Error

Submodule imports (for organization):
    from dee_result.either import Either, Left, Right
    from dee_result.result import Result, Ok, Error
    from dee_result.guard import run_guard, run_s_guard
    from dee_result.decorators import guarded, guarded_stream
"""

# Configuration
from dee_result._config import GuardConfig, get_config, init, reset
from dee_result._logging import configure_logging, get_logger

# Decorators
from dee_result.decorators import guarded, guarded_stream

# Either types
from dee_result.either import Either, Left, Right

# Errors
from dee_result.errors import GuardError, GuardException, InvalidAccessError, wrap_exception

# Guards
from dee_result.guard import run_guard, run_s_guard

# Result types
from dee_result.result import Error, Ok, Result

__all__ = [
    'Either',
    'Error',
    'GuardConfig',
    'GuardError',
    'GuardException',
    'InvalidAccessError',
    'Left',
    'Ok',
    'Result',
    'Right',
    'configure_logging',
    'get_config',
    'get_logger',
    'guarded',
    'guarded_stream',
    'init',
    'reset',
    'run_guard',
    'run_s_guard',
    'wrap_exception',
]
