"""Destructuring lowering for JavaScript binding patterns."""

from .api import (  # noqa: F401
    transform_source,
    transform_file,
    lower_source_declarations,
)
from .lowering import lower_declaration  # noqa: F401
from .hoisting import lower_function_signature  # noqa: F401
from .naming import NameAllocator, reset_module_state  # noqa: F401
from .config import LoweringConfig  # noqa: F401
