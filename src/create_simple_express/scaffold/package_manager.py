"""Package manager detection and post-scaffold instructions.

npm, pnpm, yarn and bun publish their identity to child processes through
``npm_config_user_agent``, e.g. ``pnpm/8.6.0 npm/? node/v20.3.0 linux x64``.
"""

import os
from dataclasses import dataclass

USER_AGENT_ENV_VAR = "npm_config_user_agent"
DEFAULT_PACKAGE_MANAGER = "npm"


@dataclass(frozen=True)
class PkgInfo:
    name: str
    version: str | None = None


def detect(user_agent: str | None) -> PkgInfo | None:
    """Parse a package manager identity string.

    Only the first whitespace-delimited token is used. Tokens without a
    version still yield a result.

    Examples:
        >>> detect("pnpm/8.6.0 node/v20.3.0 linux x64")
        PkgInfo(name='pnpm', version='8.6.0')
        >>> detect("") is None
        True
    """
    if not user_agent or not user_agent.strip():
        return None

    first = user_agent.split()[0]
    parts = first.split("/")
    return PkgInfo(name=parts[0], version=parts[1] if len(parts) > 1 else None)


def detect_from_environment(environ=None) -> PkgInfo | None:
    environ = os.environ if environ is None else environ
    return detect(environ.get(USER_AGENT_ENV_VAR))


def instructions_for(pkg_info: PkgInfo | None, cd_path: str | None = None) -> list[str]:
    """Commands the user should run after scaffolding.

    Args:
        pkg_info: Detected package manager, None falls back to npm
        cd_path: Relative path to the new project, None when it is the
            current directory

    Returns:
        Ordered shell commands
    """
    commands = []
    if cd_path:
        commands.append(f'cd "{cd_path}"' if " " in cd_path else f"cd {cd_path}")

    manager = pkg_info.name if pkg_info and pkg_info.name else DEFAULT_PACKAGE_MANAGER
    if manager == "yarn":
        commands.extend(["yarn", "yarn dev"])
    else:
        commands.extend([f"{manager} install", f"{manager} run dev"])
    return commands


def done_message(commands: list[str]) -> str:
    """Format the closing message shown after a successful run."""
    lines = ["Done. Now run:", ""]
    lines.extend(f"  {command}" for command in commands)
    return "\n".join(lines)
