"""Tests for package manager detection and next-step instructions."""

import pytest

from create_simple_express.scaffold.package_manager import (
    PkgInfo,
    detect,
    detect_from_environment,
    done_message,
    instructions_for,
)


class TestDetect:
    @pytest.mark.parametrize("user_agent", [None, "", "   "])
    def test_absent_identity(self, user_agent):
        assert detect(user_agent) is None

    def test_pnpm(self):
        assert detect("pnpm/8.6.0 npm/? node/v20.3.0 linux x64") == PkgInfo(name="pnpm", version="8.6.0")

    def test_npm(self):
        assert detect("npm/10.1.0 node/v20.8.0 darwin arm64 workspaces/false") == PkgInfo("npm", "10.1.0")

    def test_missing_version_is_best_effort(self):
        assert detect("bun") == PkgInfo(name="bun", version=None)

    def test_extra_segments_are_ignored(self):
        assert detect("yarn/1.22.19/extra node/v18") == PkgInfo(name="yarn", version="1.22.19")

    def test_leading_whitespace(self):
        assert detect("  yarn/4.0.0 node/v20") == PkgInfo(name="yarn", version="4.0.0")

    def test_from_environment(self):
        assert detect_from_environment({"npm_config_user_agent": "bun/1.1.0 npm/? node/v21"}).name == "bun"
        assert detect_from_environment({}) is None


class TestInstructionsFor:
    """Test the command sequence printed after scaffolding."""

    def test_npm_with_cd(self):
        assert instructions_for(PkgInfo("npm", "10.1.0"), "my-app") == [
            "cd my-app",
            "npm install",
            "npm run dev",
        ]

    def test_defaults_to_npm(self):
        assert instructions_for(None, None) == ["npm install", "npm run dev"]

    def test_yarn_two_line_form(self):
        assert instructions_for(PkgInfo("yarn", "1.22.19"), None) == ["yarn", "yarn dev"]

    @pytest.mark.parametrize("manager", ["pnpm", "bun", "cnpm"])
    def test_generic_form(self, manager):
        assert instructions_for(PkgInfo(manager), None) == [f"{manager} install", f"{manager} run dev"]

    def test_path_with_spaces_is_quoted(self):
        assert instructions_for(None, "My App")[0] == 'cd "My App"'

    def test_relative_parent_path(self):
        assert instructions_for(None, "../sibling")[0] == "cd ../sibling"


class TestDoneMessage:
    def test_layout(self):
        message = done_message(["cd my-app", "npm install", "npm run dev"])
        assert message == "Done. Now run:\n\n  cd my-app\n  npm install\n  npm run dev"
