"""
Configuration for the mobeen_auth installer.

Everything the installer hard-codes (dependency sets, external commands,
template layout, the default tsconfig.json) lives here so that it can be
overridden from a JSON file.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from typing import Any

DEFAULT_DEPENDENCIES = [
    "next-auth@beta",
    "@auth/prisma-adapter",
    "@prisma/client",
    "bcryptjs",
    "react-icons",
    "axios",
    "react-hot-toast",
]

# TypeScript, Prisma CLI and type packages
DEFAULT_DEV_DEPENDENCIES = [
    "prisma",
    "typescript",
    "@types/node",
    "@types/react",
    "@types/bcryptjs",
]

DEFAULT_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "esnext",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "forceConsistentCasingInFileNames": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "node",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "types": ["node"],
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx"],
    "exclude": ["node_modules"],
}


class ConfigError(ValueError):
    """Raised when a configuration dictionary cannot be applied."""

    pass


@dataclass
class ScaffoldConfig:
    """Configuration options for scaffolding."""

    # Runtime packages installed into the project
    dependencies: list[str] = field(default_factory=lambda: list(DEFAULT_DEPENDENCIES))

    # Development-only packages
    dev_dependencies: list[str] = field(default_factory=lambda: list(DEFAULT_DEV_DEPENDENCIES))

    # Package manager invocation; packages are appended
    install_command: list[str] = field(default_factory=lambda: ["npm", "install"])

    # Flag inserted before dev packages
    dev_install_flag: str = "-D"

    # Code generation step run after the config is in place
    generate_command: list[str] = field(default_factory=lambda: ["npx", "prisma", "generate"])

    # Template layout, relative to both the template root and the project root
    schema_dir: str = "prisma"
    code_dir: str = "src"
    env_file: str = ".env.example"

    # Generated config written at the project root when missing
    generated_config_name: str = "tsconfig.json"
    generated_config: dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULT_TSCONFIG))

    def install_invocations(self) -> list[tuple[str, list[str]]]:
        """Labelled argument lists for the dependency install step, in order.

        An empty dependency set produces no invocation.
        """
        invocations = []
        if self.dependencies:
            invocations.append(("dependencies", [*self.install_command, *self.dependencies]))
        if self.dev_dependencies:
            invocations.append(("devDependencies", [*self.install_command, self.dev_install_flag, *self.dev_dependencies]))
        return invocations

    @staticmethod
    def from_dict(d: dict) -> ScaffoldConfig:
        """Create a config from a dictionary, overriding only the given keys.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        if not isinstance(d, dict):
            raise ConfigError(f"Configuration must be a JSON object, got {type(d).__name__}")

        config = ScaffoldConfig()
        known = {f.name for f in fields(ScaffoldConfig)}
        for k, v in d.items():
            if k not in known:
                raise ConfigError(f"Unknown configuration key: {k}")
            default = getattr(config, k)
            if isinstance(default, list):
                if not isinstance(v, list) or not all(isinstance(item, str) for item in v):
                    raise ConfigError(f"{k} must be a list of strings")
            elif isinstance(default, dict):
                if not isinstance(v, dict):
                    raise ConfigError(f"{k} must be an object")
            elif not isinstance(v, str):
                raise ConfigError(f"{k} must be a string")
            setattr(config, k, v)

        if not config.install_command:
            raise ConfigError("install_command must not be empty")
        if not config.generate_command:
            raise ConfigError("generate_command must not be empty")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "dependencies": list(self.dependencies),
            "dev_dependencies": list(self.dev_dependencies),
            "install_command": list(self.install_command),
            "dev_install_flag": self.dev_install_flag,
            "generate_command": list(self.generate_command),
            "schema_dir": self.schema_dir,
            "code_dir": self.code_dir,
            "env_file": self.env_file,
            "generated_config_name": self.generated_config_name,
            "generated_config": copy.deepcopy(self.generated_config),
        }
