"""Base utility class providing core shared logic for all utility modules."""

import json
import logging
from typing import Any, Dict, List


class BaseUtils:
    """Base class for all utility modules in the eschermerge framework.

    Provides core shared functionality including logging, error handling,
    and common utility methods that are inherited by all specialized
    utility modules.
    """

    def __init__(self, name="Unknown", log_level: str = "INFO", **kwargs: Any) -> None:
        """Initialize the base utility class."""
        self.logger = self._setup_logger(log_level)

        # Allow subclasses to pass additional initialization parameters
        for key, value in kwargs.items():
            setattr(self, key, value)

        self.version = "0.1.0"
        self.name = name

        self.reset_attributes()

    def reset_attributes(self):
        # Tracks what the current method call produced and consumed
        self.obj_created = []
        self.input_objects = []
        self.method = None
        self.params = {}
        self.initialized = False

    def initialize_call(
        self,
        method: str,
        params: Dict[str, Any],
        print_params: bool = False,
        no_print: List[str] = None,
    ) -> None:
        """Reinitialize provenance tracking for a primary method call."""
        if no_print is None:
            no_print = []

        self.obj_created = []
        self.input_objects = []
        self.method = method
        self.params = dict(params)
        self.initialized = True

        if print_params:
            log_params = {k: v for k, v in self.params.items() if k not in no_print}
            self.log_info(f"{method}: {json.dumps(log_params, indent=2, default=str)}")

    def _setup_logger(self, log_level: str) -> logging.Logger:
        """Set up logging for the utility module."""
        logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        logger.setLevel(getattr(logging, log_level.upper()))
        logger.propagate = False

        # Only add handler if none exists to prevent duplicate logs
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def log_info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def log_debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

    ### Constant functions ###
    def const_sbml_prefixes(self) -> Dict[str, str]:
        return {"reaction": "R_", "metabolite": "M_", "gene": "G_"}
