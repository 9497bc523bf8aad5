"""fabricator-assemble: assemble static toolkit pages from views, materials, data and docs.

Basic usage:
    from fabricator_assemble import assemble

    assemble(
        {
            "views": ["src/views/**/*", "!src/views/layouts/**"],
            "buildData": {"version": "1.2.0"},
            "dest": "dist",
            "logErrors": True,
        }
    )
"""

from fabricator_assemble._assemble import assemble
from fabricator_assemble.assembly import (
    AssembleResult,
    Assembler,
    AssemblyStore,
    ErrorReport,
    ErrorSink,
    ModuleRequest,
)
from fabricator_assemble.config import AssembleConfig, load_config
from fabricator_assemble.exceptions import (
    AssembleError,
    AssembleRenderError,
    AssembleWriteError,
    ConfigError,
    ConfigLoadError,
    ScanError,
)
from fabricator_assemble.templating import TemplateFunction, TemplateTag

__all__ = [
    "AssembleConfig",
    "AssembleError",
    "AssembleRenderError",
    "AssembleResult",
    "AssembleWriteError",
    "Assembler",
    "AssemblyStore",
    "ConfigError",
    "ConfigLoadError",
    "ErrorReport",
    "ErrorSink",
    "ModuleRequest",
    "ScanError",
    "TemplateFunction",
    "TemplateTag",
    "assemble",
    "load_config",
]
