"""create-simple-express.

Scaffolding CLI that materializes a ready-to-run Express starter project
from one of the bundled templates.

This package contains:
- The scaffolding engine (naming, conflict handling, materialization)
- The command-line interface
- Logging and configuration utilities
- The bundled template payloads
"""

# Version information
__version__ = "1.2.0"

__all__ = ["__version__"]
