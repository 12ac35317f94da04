"""Template payloads for project scaffolding.

Each subdirectory is one catalogued template (``basic``, ``api``). Files are
copied into the new project as they are, except:

- ``package.json``: ``name`` is set to the chosen package name
- ``*.template*`` files: ``{{name}}`` is replaced, the marker is dropped
- ``_gitignore``, ``_prettierrc``, ``_gitattributes``, ``_env_example``:
  written as the matching dotfile
"""

__all__ = []
