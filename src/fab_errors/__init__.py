from loguru import logger

from fab_errors.application.chain import check_error_chain, has_error_in_chain
from fab_errors.application.error import ChainMismatchError
from fab_errors.base_specs import (
    INVALID_ARGUMENT_SPEC,
    NOT_IMPLEMENTED_SPEC,
    OPERATION_FAILED_SPEC,
    UNEXPECTED_ERROR_SPEC,
    InvalidArgumentContext,
    NotImplementedContext,
    OperationFailedContext,
    UnexpectedErrorContext,
)
from fab_errors.config import Settings
from fab_errors.container import (
    FabErrorsContainer,
    UnknownDependencyError,
    dependencies,
    get_logger,
    get_setting,
    reset_dependencies,
    set_dependencies,
)
from fab_errors.domain.fab_error import FabError, structure_cause
from fab_errors.domain.formatting import format_message
from fab_errors.domain.models import ErrorCriteria, ErrorSpec, ExpectedChainLevel
from fab_errors.domain.protocols import LoggerLike
from fab_errors.error_utils import log_and_wrap, wrap_errors
from fab_errors.errors import AppError

logger.disable("fab_errors")

__all__ = [
    "AppError",
    "ChainMismatchError",
    "ErrorCriteria",
    "ErrorSpec",
    "ExpectedChainLevel",
    "FabError",
    "FabErrorsContainer",
    "INVALID_ARGUMENT_SPEC",
    "InvalidArgumentContext",
    "LoggerLike",
    "NOT_IMPLEMENTED_SPEC",
    "NotImplementedContext",
    "OPERATION_FAILED_SPEC",
    "OperationFailedContext",
    "Settings",
    "UNEXPECTED_ERROR_SPEC",
    "UnexpectedErrorContext",
    "UnknownDependencyError",
    "check_error_chain",
    "dependencies",
    "format_message",
    "get_logger",
    "get_setting",
    "has_error_in_chain",
    "log_and_wrap",
    "reset_dependencies",
    "set_dependencies",
    "structure_cause",
    "wrap_errors",
]
