#!/usr/bin/env python3

import pytest

from mobeen_auth.config import DEFAULT_TSCONFIG, ConfigError, ScaffoldConfig
from mobeen_auth.paths import TEMPLATE_DIR, resolve_paths


class TestScaffoldConfig:
    """Test cases for ScaffoldConfig"""

    def test_defaults(self):
        """Test the default dependency sets and commands"""
        config = ScaffoldConfig()

        assert "next-auth@beta" in config.dependencies
        assert "@prisma/client" in config.dependencies
        assert "prisma" in config.dev_dependencies
        assert config.generate_command == ["npx", "prisma", "generate"]
        assert config.generated_config == DEFAULT_TSCONFIG

    def test_default_tsconfig_not_shared(self):
        """Test each config gets its own copy of the default tsconfig"""
        config = ScaffoldConfig()
        config.generated_config["compilerOptions"]["strict"] = False

        assert DEFAULT_TSCONFIG["compilerOptions"]["strict"] is True
        assert ScaffoldConfig().generated_config["compilerOptions"]["strict"] is True

    def test_install_invocations(self):
        """Test runtime packages are installed before dev packages"""
        config = ScaffoldConfig(dependencies=["a", "b"], dev_dependencies=["c"])

        assert config.install_invocations() == [
            ("dependencies", ["npm", "install", "a", "b"]),
            ("devDependencies", ["npm", "install", "-D", "c"]),
        ]

    def test_install_invocations_skip_empty_sets(self):
        """Test an empty dependency set produces no invocation"""
        assert ScaffoldConfig(dependencies=[], dev_dependencies=["c"]).install_invocations() == [
            ("devDependencies", ["npm", "install", "-D", "c"]),
        ]
        assert ScaffoldConfig(dependencies=[], dev_dependencies=[]).install_invocations() == []

    def test_from_dict_overrides_given_keys(self):
        """Test from_dict only replaces the keys present"""
        config = ScaffoldConfig.from_dict({"install_command": ["pnpm", "add"], "dev_dependencies": []})

        assert config.install_command == ["pnpm", "add"]
        assert config.dev_dependencies == []
        assert config.dependencies == ScaffoldConfig().dependencies

    def test_round_trip(self):
        """Test to_dict output is accepted by from_dict"""
        config = ScaffoldConfig(env_file=".env.sample")
        assert ScaffoldConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize(
        "data",
        [
            {"unknown": 1},
            {"dependencies": "next-auth"},
            {"dependencies": [1, 2]},
            {"generated_config": []},
            {"schema_dir": 3},
            {"install_command": []},
            {"generate_command": []},
        ],
    )
    def test_from_dict_rejects_invalid(self, data):
        """Test invalid values raise ConfigError"""
        with pytest.raises(ConfigError):
            ScaffoldConfig.from_dict(data)

    def test_from_dict_rejects_non_object(self):
        """Test a non-dict document raises ConfigError"""
        with pytest.raises(ConfigError):
            ScaffoldConfig.from_dict(["npm"])


class TestResolvePaths:
    """Test cases for resolve_paths"""

    def test_defaults(self, tmp_path, monkeypatch):
        """Test the working directory and bundled templates are the defaults"""
        monkeypatch.chdir(tmp_path)

        paths = resolve_paths()

        assert paths.project_dir == tmp_path.resolve()
        assert paths.template_dir == TEMPLATE_DIR.resolve()

    def test_explicit_paths_are_absolute(self, tmp_path, monkeypatch):
        """Test relative paths are resolved against the working directory"""
        monkeypatch.chdir(tmp_path)

        paths = resolve_paths(project_dir="app", template_dir="tpl")

        assert paths.project_dir == tmp_path.resolve() / "app"
        assert paths.template("prisma") == tmp_path.resolve() / "tpl" / "prisma"
        assert paths.project("src", "auth.ts") == tmp_path.resolve() / "app" / "src" / "auth.ts"

    def test_bundled_templates_present(self):
        """Test the package ships the template tree"""
        config = ScaffoldConfig()

        assert (TEMPLATE_DIR / config.schema_dir / "schema.prisma").is_file()
        assert (TEMPLATE_DIR / config.code_dir / "auth.ts").is_file()
        assert (TEMPLATE_DIR / config.env_file).is_file()


if __name__ == "__main__":
    pytest.main([__file__])
