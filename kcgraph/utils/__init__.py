"""Utility modules for kcgraph."""

from kcgraph.utils.digest import compute_digest, digest, serialize
from kcgraph.utils.exceptions import ConfigurationError, InvalidArgumentError, KcGraphError
from kcgraph.utils.id_generator import make_node_id, param_case, pascal_case, split_words
from kcgraph.utils.logger import configure_logging, get_logger, setup_logging

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "setup_logging",
    # ID generation
    "make_node_id",
    "param_case",
    "pascal_case",
    "split_words",
    # Digest
    "digest",
    "serialize",
    "compute_digest",
    # Exceptions
    "KcGraphError",
    "InvalidArgumentError",
    "ConfigurationError",
]
